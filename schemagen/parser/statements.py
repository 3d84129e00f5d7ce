"""
Разбор сгенерированного SQL на операторы.

Используется для самопроверки генератора: каждый ресурс схемы обязан
быть ровно одним оператором CREATE. Тело функции в $$...$$ sqlparse
считает одним литералом, поэтому ; внутри тела не разбивает оператор.
"""

from __future__ import annotations

from typing import List

import sqlparse


def split_statements(sql_text: str) -> List[str]:
    if not sql_text or not sql_text.strip():
        return []
    return [s.strip() for s in sqlparse.split(sql_text) if s.strip()]


def get_statement_type(sql_text: str) -> str:
    """'CREATE', 'ALTER', ... или 'UNKNOWN'."""
    statements = sqlparse.parse(sql_text)
    if not statements:
        return "UNKNOWN"
    # "CREATE OR REPLACE" лексер отдаёт одним ключевым словом
    statement_type = statements[0].get_type()
    return statement_type.split()[0] if statement_type else "UNKNOWN"


def is_single_create_statement(sql_text: str) -> bool:
    return len(split_statements(sql_text)) == 1 and get_statement_type(sql_text) == "CREATE"
