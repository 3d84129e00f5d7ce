from .base import BaseDeclarationRule
from .registry import RuleRegistry

from .rule_d1 import RuleD1
from .rule_d2 import RuleD2
from .rule_d3 import RuleD3
from .rule_d4 import RuleD4

# порядок важен: именно в нём правила применяются к каждой сущности
DEFAULT_RULES = [
    RuleD1,
    RuleD2,
    RuleD3,
    RuleD4,
]

__all__ = [
    "BaseDeclarationRule",
    "RuleRegistry",
    "RuleD1",
    "RuleD2",
    "RuleD3",
    "RuleD4",
    "DEFAULT_RULES",
]
