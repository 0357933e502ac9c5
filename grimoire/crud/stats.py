from grimoire.crud.base import CrudBase
from grimoire.models import Attribute, Skill

class AttributeCrud(CrudBase):
    model = Attribute
    parent_key = "character_id"


class SkillCrud(CrudBase):
    model = Skill
    parent_key = "character_id"
