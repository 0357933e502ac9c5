from grimoire.crud.base import CrudBase
from grimoire.models import Character

class CharacterCrud(CrudBase):
    model = Character
    parent_key = "game_id"
