from typing import Any

from schemagen.rules.base import BaseDeclarationRule
from schemagen.core.constants import RULE_IDS
from schemagen.core.exceptions import UndeclaredUniqueProperty


class RuleD3(BaseDeclarationRule):
    RULE_ID = "D3"
    RULE_NAME = RULE_IDS[RULE_ID]
    RULE_DESCRIPTION = (
        "Каждое имя из unique должно быть ключом properties "
        "(регистр имеет значение)."
    )

    def check(self, entity: Any) -> None:
        property_names = list(entity.properties.keys())
        for unique_property_name in entity.unique:
            if unique_property_name not in property_names:
                raise UndeclaredUniqueProperty(entity.name, unique_property_name)
