# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Result models for TypeScript declaration generation.

These models describe what the generator produced for a schema document and
what the converter did with each file of a batch.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class EnumExportFormat(str, Enum):
    """Which generated declarations are exported from the output module.

    Attributes:
        UNIQUE_EXPORTS: Export every generated declaration.
        ROOT_ONLY: Export only the declaration generated for the document root.
    """

    UNIQUE_EXPORTS = "UNIQUE_EXPORTS"
    ROOT_ONLY = "ROOT_ONLY"


class ModelTypeDeclaration(BaseModel):
    """One generated TypeScript declaration.

    Attributes:
        pointer: Schema location the declaration was generated for.
        name: Unique declaration name.
        definition: Complete declaration text, including the doc block.
        is_type_alias: True for ``type X = ...``, False for ``interface X {...}``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pointer: str = Field(..., description="Schema location of the declaration")
    name: str = Field(..., min_length=1, description="Unique declaration name")
    definition: str = Field(..., description="Declaration text")
    is_type_alias: bool = Field(..., description="Whether the declaration is a type alias")


class ModelGenerationResult(BaseModel):
    """Declarations generated for one schema document.

    Attributes:
        declarations: Declarations ordered by schema pointer.
        exported_names: Names to export, in declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    declarations: list[ModelTypeDeclaration] = Field(default_factory=list)
    exported_names: list[str] = Field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [declaration.name for declaration in self.declarations]


class ModelConversionOutcome(BaseModel):
    """Outcome of converting one schema file.

    Attributes:
        schema_path: The schema file that was converted.
        output_path: The written declaration file, or None if nothing was written.
        declaration_count: Number of declarations generated.
        error: Error message when the conversion failed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    schema_path: Path
    output_path: Path | None = None
    declaration_count: int = Field(default=0, ge=0)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


class ModelConversionReport(BaseModel):
    """Outcomes for every schema file of a directory conversion."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcomes: list[ModelConversionOutcome] = Field(default_factory=list)

    @property
    def failed(self) -> list[ModelConversionOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def written(self) -> list[ModelConversionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.output_path is not None]
