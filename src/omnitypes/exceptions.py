# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Exception types for TypeScript declaration generation.

This module defines a hierarchy of exceptions for schema conversion:

- TypeGenerationError: Base exception for all generation errors
- ReferenceCycleError: A ``$ref`` chain loops back on itself
- SchemaLoadError: A schema document could not be read or parsed
- OutputWriteError: Generated declarations could not be written

Each of these is fatal for one schema document only. Batch conversion
records the failure and continues with the remaining documents.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "TypeGenerationError",
    "ReferenceCycleError",
    "SchemaLoadError",
    "OutputWriteError",
]


class TypeGenerationError(Exception):
    """Base exception for type generation errors."""

    pass


class ReferenceCycleError(TypeGenerationError):
    """Raised when resolving a ``$ref`` revisits a pointer already in the chain.

    Attributes:
        chain: Pointers in resolution order, ending with the repeated pointer.

    Example:
        >>> raise ReferenceCycleError(["#/definitions/A", "#/definitions/A"])
        ReferenceCycleError: Circular reference detected: #/definitions/A -> #/definitions/A
    """

    def __init__(self, chain: list[str], message: str | None = None) -> None:
        self.chain = list(chain)
        if message is None:
            message = f"Circular reference detected: {' -> '.join(self.chain)}"
        super().__init__(message)


class SchemaLoadError(TypeGenerationError):
    """Raised when a schema document cannot be read or is not a JSON object.

    Attributes:
        path: The schema file that failed to load.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class OutputWriteError(TypeGenerationError):
    """Raised when a generated declaration file cannot be written.

    Attributes:
        path: The output file that could not be written.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
