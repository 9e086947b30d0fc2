# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Unit tests for JSDoc block generation."""

from __future__ import annotations

import pytest

from omnitypes.generation.docblock import generate_docblock


@pytest.mark.unit
class TestGenerateDocblock:
    def test_no_metadata_gives_empty_string(self) -> None:
        assert generate_docblock({"type": "string"}) == ""
        assert generate_docblock({"examples": []}) == ""

    def test_title_only(self) -> None:
        assert generate_docblock({"title": "User"}) == "/**\n * User\n */\n"

    def test_description_without_title_has_no_leading_blank(self) -> None:
        assert generate_docblock({"description": "A user"}) == "/**\n * A user\n */\n"

    def test_title_and_description(self) -> None:
        block = generate_docblock({"title": "User", "description": "A user in the system"})
        assert block == "/**\n * User\n *\n * A user in the system\n */\n"

    def test_first_example_is_pretty_printed(self) -> None:
        block = generate_docblock({"title": "T", "examples": [{"id": "1"}, {"id": "2"}]})
        assert block == (
            "/**\n"
            " * T\n"
            " *\n"
            " * @example\n"
            " * {\n"
            ' *   "id": "1"\n'
            " * }\n"
            " */\n"
        )

    def test_scalar_example(self) -> None:
        block = generate_docblock({"description": "Count", "examples": [3]})
        assert block == "/**\n * Count\n *\n * @example\n * 3\n */\n"

    def test_multiline_description_lines_are_prefixed(self) -> None:
        block = generate_docblock({"description": "line one\nline two"})
        assert block == "/**\n * line one\n * line two\n */\n"

    def test_comment_terminator_is_escaped(self) -> None:
        block = generate_docblock({"description": "glob: src/*/"})
        assert "*/\n */" not in block
        assert " * glob: src/*\\/\n" in block
