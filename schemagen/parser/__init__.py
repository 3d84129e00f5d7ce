"""
parser package — разбор сгенерированного SQL (sqlparse)
"""

from .statements import get_statement_type, is_single_create_statement, split_statements

__all__ = [
    "split_statements",
    "get_statement_type",
    "is_single_create_statement",
]
