"""omnitypes - JSON Schema to TypeScript declaration generator.

Converts schema documents into named, cross-referencing ``interface`` and
``type`` declarations for static type checking.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("omnitypes")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from omnitypes.converter import convert_directory, convert_schema_file, load_schema
from omnitypes.exceptions import (
    OutputWriteError,
    ReferenceCycleError,
    SchemaLoadError,
    TypeGenerationError,
)
from omnitypes.generation import (
    SchemaScanner,
    TypeExpressionBuilder,
    TypeNameRegistry,
    generate_declarations,
    generate_type_definition,
    render_module,
    scan_schema,
)
from omnitypes.models import (
    EnumExportFormat,
    ModelConversionOutcome,
    ModelConversionReport,
    ModelGenerationResult,
    ModelTypeDeclaration,
)

__all__ = [
    "__version__",
    # Generation
    "generate_declarations",
    "generate_type_definition",
    "render_module",
    "scan_schema",
    "SchemaScanner",
    "TypeExpressionBuilder",
    "TypeNameRegistry",
    # Files
    "convert_directory",
    "convert_schema_file",
    "load_schema",
    # Models
    "EnumExportFormat",
    "ModelConversionOutcome",
    "ModelConversionReport",
    "ModelGenerationResult",
    "ModelTypeDeclaration",
    # Errors
    "OutputWriteError",
    "ReferenceCycleError",
    "SchemaLoadError",
    "TypeGenerationError",
]
