# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Documentation comment generation from schema metadata."""

from __future__ import annotations

import json
from typing import Any


def _comment_safe(text: str) -> str:
    return text.replace("*/", "*\\/")


def generate_docblock(schema: dict[str, Any]) -> str:
    """
    Generate a JSDoc block from ``title``, ``description`` and ``examples``.

    Example:
        >>> print(generate_docblock({"title": "User", "description": "A user"}), end="")
        /**
         * User
         *
         * A user
         */

    Returns:
        The comment block followed by a newline, or an empty string when the
        schema carries no metadata.
    """
    lines: list[str] = []

    title = schema.get("title")
    if title:
        lines.append(str(title))

    description = schema.get("description")
    if description:
        if lines:
            lines.append("")
        lines.append(str(description))

    examples = schema.get("examples")
    if isinstance(examples, list) and examples:
        lines.append("")
        lines.append("@example")
        lines.append(json.dumps(examples[0], indent=2, ensure_ascii=False))

    if not lines:
        return ""

    rendered = []
    for line in "\n".join(lines).split("\n"):
        rendered.append(f" * {_comment_safe(line)}".rstrip())
    return "/**\n" + "\n".join(rendered) + "\n */\n"
