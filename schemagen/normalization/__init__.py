"""
normalization — проверка деклараций перед генерацией.
"""

from .normalizer import DeclarationNormalizer, normalize_declaration_contents

__all__ = [
    "DeclarationNormalizer",
    "normalize_declaration_contents",
]
