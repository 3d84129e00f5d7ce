import re
from typing import Any

from schemagen.rules.base import BaseDeclarationRule
from schemagen.core.constants import RULE_IDS
from schemagen.core.exceptions import NamingConventionViolation
from schemagen.utils.validators import property_flag


class RuleD2(BaseDeclarationRule):
    """
    D2: соглашение об именовании.

    Имя сущности и имена свойств — snake_case в пределах длины;
    свойство-ссылка оканчивается на _id (массив ссылок — на _ids).
    """

    RULE_ID = "D2"
    RULE_NAME = RULE_IDS[RULE_ID]
    RULE_DESCRIPTION = (
        "Имена сущностей и свойств соответствуют шаблону, "
        "а имена ссылок имеют суффикс _id / _ids."
    )

    def check(self, entity: Any) -> None:
        pattern = re.compile(self.config["pattern"])
        max_length = int(self.config["max_length"])

        reason = self._name_violation(entity.name, pattern, max_length)
        if reason:
            raise NamingConventionViolation(entity.name, reason)

        for property_name, definition in entity.properties.items():
            reason = self._name_violation(property_name, pattern, max_length)
            if reason:
                raise NamingConventionViolation(entity.name, reason, property_name)

            referenced = property_flag(definition, "references")
            if referenced:
                suffix = (
                    self.config["reference_array_suffix"]
                    if property_flag(definition, "array")
                    else self.config["reference_suffix"]
                )
                if not property_name.endswith(suffix):
                    raise NamingConventionViolation(
                        entity.name,
                        f"references '{referenced}' and must be named with the '{suffix}' suffix",
                        property_name,
                    )

    def _name_violation(self, name: str, pattern: re.Pattern, max_length: int):
        if not pattern.fullmatch(name):
            return f"does not match the naming convention '{pattern.pattern}'"
        if len(name) > max_length:
            return f"is longer than {max_length} characters"
        return None
