from typing import Any

from schemagen.rules.base import BaseDeclarationRule
from schemagen.core.constants import RULE_IDS
from schemagen.core.exceptions import NoUniqueDeterminant


class RuleD4(BaseDeclarationRule):
    RULE_ID = "D4"
    RULE_NAME = RULE_IDS[RULE_ID]
    RULE_DESCRIPTION = "Список unique не может быть пустым."

    def check(self, entity: Any) -> None:
        if not entity.unique:
            raise NoUniqueDeterminant(entity.name)
