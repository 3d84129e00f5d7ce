"""
Рендеринг FunctionDefinition в текст CREATE OR REPLACE FUNCTION.

Единственное место, где задаются шаблон функции, отступы
и порядок секций:

CREATE OR REPLACE FUNCTION <name>(
  <param>, ...
)
RETURNS <type>
LANGUAGE <language>
AS $$
  DECLARE
    <declaration>
  BEGIN
    <block>

    <block>

    RETURN <variable>;
  END;
$$
"""

from __future__ import annotations

import textwrap
from typing import List

from schemagen.core.constants import BLOCK_INDENT

from .function_ir import FunctionDefinition

_LEVEL = "  "


class FunctionRenderer:

    def __init__(self, indent: int = BLOCK_INDENT):
        self.indent = indent

    def render(self, definition: FunctionDefinition) -> str:
        body_prefix = " " * self.indent
        lines: List[str] = [
            f"CREATE OR REPLACE FUNCTION {definition.name}(",
            _LEVEL + f",\n{_LEVEL}".join(definition.parameters),
            ")",
            f"RETURNS {definition.returns}",
            f"LANGUAGE {definition.language}",
            "AS $$",
            f"{_LEVEL}DECLARE",
        ]
        lines.extend(body_prefix + d for d in definition.declarations)
        lines.append(f"{_LEVEL}BEGIN")

        for block in definition.present_blocks:
            # textwrap.indent не трогает пустые строки внутри блока
            lines.append(textwrap.indent(block.strip("\n"), body_prefix))
            lines.append("")

        lines.extend([
            f"{body_prefix}-- {definition.return_comment}",
            f"{body_prefix}RETURN {definition.return_variable};",
            f"{_LEVEL}END;",
            "$$",
        ])
        return "\n".join(lines)
