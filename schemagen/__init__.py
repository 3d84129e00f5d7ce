"""
schemagen — генератор битемпоральной схемы PostgreSQL по декларациям сущностей.
"""

from .core.constants import VERSION

__version__ = VERSION
