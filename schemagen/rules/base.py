"""
Базовый класс для правил валидации деклараций сущностей.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.constants import DEFAULT_CONFIG


class BaseDeclarationRule(ABC):
    """
    Абстрактный базовый класс для всех правил валидации деклараций.

    Каждое правило D_i представляет собой проверку:
    D_i(entity) → ∅ или исключение DeclarationError
    Правило ничего не возвращает и не изменяет сущность.
    """

    RULE_ID: str = ""
    RULE_NAME: str = ""
    RULE_DESCRIPTION: str = ""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self._init_config()

    def _init_config(self) -> None:
        defaults = {
            "enabled": True,
            **DEFAULT_CONFIG["rules"].get(self.RULE_ID, {}),
        }
        for k, v in defaults.items():
            self.config.setdefault(k, v)

    @abstractmethod
    def check(self, entity: Any) -> None:
        """
        Проверяет одну сущность.
        При нарушении бросает DeclarationError, иначе ничего не делает.
        """
        raise NotImplementedError

    def get_info(self) -> Dict[str, Any]:
        return {
            "id": self.RULE_ID,
            "name": self.RULE_NAME,
            "description": self.RULE_DESCRIPTION,
            "config": self.config,
            "class_name": self.__class__.__name__,
        }

    def is_enabled(self) -> bool:
        return bool(self.config.get("enabled", True))

    def enable(self) -> None:
        self.config["enabled"] = True

    def disable(self) -> None:
        self.config["enabled"] = False

    def validate(self) -> bool:
        return bool(self.RULE_ID and self.RULE_NAME and self.RULE_DESCRIPTION)

    def __str__(self) -> str:
        enabled = "✓" if self.is_enabled() else "✗"
        return f"[{enabled}] {self.RULE_ID}: {self.RULE_NAME}"

    def __repr__(self) -> str:
        return f"<Rule {self.RULE_ID}: {self.__class__.__name__}>"
