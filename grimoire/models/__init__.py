from grimoire.models.user import User, UserRole
from grimoire.models.game import Game
from grimoire.models.character import Character
from grimoire.models.stats import Attribute, Skill

__all__ = [
    "User", "UserRole",
    "Game", "Character",
    "Attribute", "Skill"
]
