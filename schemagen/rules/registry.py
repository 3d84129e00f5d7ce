"""
Реестр правил валидации деклараций.
Управляет регистрацией, конфигурацией и применением правил.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Type

from .base import BaseDeclarationRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Реестр для управления правилами валидации.

    Порядок применения фиксирован порядком регистрации:
    сначала все правила для первой сущности, затем для второй и т.д.
    Первое нарушение прерывает обработку всей пачки.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self._rules: Dict[str, BaseDeclarationRule] = {}

    def register_rule(
        self,
        rule_class: Type[BaseDeclarationRule],
        rule_config: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not issubclass(rule_class, BaseDeclarationRule):
            raise TypeError(f"{rule_class} должен быть подклассом BaseDeclarationRule")

        rule_id = rule_class.RULE_ID
        config = rule_config or {}

        # глобальная конфигурация под правило
        if rule_id in self.config:
            config = {**self.config[rule_id], **config}

        instance = rule_class(config)
        if not instance.validate():
            raise ValueError(f"Правило {rule_id} не прошло валидацию")

        self._rules[rule_id] = instance

    def register_rules(
        self,
        rules: List[Type[BaseDeclarationRule]],
        configs: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> None:
        configs = configs or {}
        for rc in rules:
            self.register_rule(rc, configs.get(rc.RULE_ID, {}))

    def get_rule(self, rule_id: str) -> Optional[BaseDeclarationRule]:
        return self._rules.get(rule_id)

    def get_enabled_rules(self) -> List[BaseDeclarationRule]:
        return [r for r in self._rules.values() if r.is_enabled()]

    def check_entity(self, entity: Any) -> None:
        for rule in self.get_enabled_rules():
            logger.debug("правило %s: сущность '%s'", rule.RULE_ID, entity.name)
            rule.check(entity)

    def check_all(self, entities: Sequence[Any]) -> None:
        for entity in entities:
            self.check_entity(entity)

    def __len__(self) -> int:
        return len(self._rules)
