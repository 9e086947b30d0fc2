# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Schema file discovery, loading and declaration file output.

Converts a directory of schema documents (JSON or YAML) into ``.d.ts``
files, mirroring the input directory layout::

    schemas/user.schema.json      -> types/user.d.ts
    schemas/billing/invoice.yaml  -> types/billing/invoice.d.ts

A document that fails to load or generate is logged and reported; the
remaining documents are still converted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from omnitypes.config.settings import DEFAULT_SCHEMA_PATTERNS
from omnitypes.exceptions import OutputWriteError, SchemaLoadError, TypeGenerationError
from omnitypes.generation.generator import generate_declarations, render_module
from omnitypes.generation.pointer_resolver import ROOT_POINTER, child_pointer
from omnitypes.models import (
    EnumExportFormat,
    ModelConversionOutcome,
    ModelConversionReport,
)

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
OUTPUT_SUFFIX = ".d.ts"

_JSON_SCALARS = (str, int, float, bool, type(None))


def _find_non_json_value(value: Any, pointer: str = ROOT_POINTER) -> str | None:
    """Describe the first key or value JSON cannot represent, or return None."""
    if isinstance(value, dict):
        for key, child in value.items():
            if not isinstance(key, str):
                return f"non-string key {key!r} at {pointer}"
            problem = _find_non_json_value(child, child_pointer(pointer, key))
            if problem:
                return problem
        return None
    if isinstance(value, list):
        for index, child in enumerate(value):
            problem = _find_non_json_value(child, child_pointer(pointer, index))
            if problem:
                return problem
        return None
    if isinstance(value, _JSON_SCALARS):
        return None
    return f"{type(value).__name__} value {value!r} at {pointer}"


def load_schema(path: Path) -> dict[str, Any]:
    """
    Load a schema document from a JSON or YAML file.

    Args:
        path: Schema file; ``.yaml``/``.yml`` files are parsed as YAML,
            everything else as JSON

    Returns:
        The parsed document.

    Raises:
        SchemaLoadError: If the file cannot be read, cannot be parsed, its
            root is not an object, or a YAML document holds data JSON cannot
            represent (e.g. ``on:`` keys read as booleans, unquoted dates)
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(path, f"cannot read file: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            document = yaml.safe_load(content)
        else:
            document = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SchemaLoadError(path, f"invalid document: {e}") from e

    if not isinstance(document, dict):
        raise SchemaLoadError(
            path, f"schema root must be an object, got {type(document).__name__}"
        )

    # YAML resolves `on`, `2024-01-01` and similar to non-string keys and values
    problem = _find_non_json_value(document)
    if problem:
        raise SchemaLoadError(path, f"not a JSON-compatible document: {problem}")
    return document


def output_path_for(relative_schema_path: Path, output_dir: Path) -> Path:
    """
    Map a schema path (relative to the schemas directory) to its output file.

    Example:
        >>> output_path_for(Path("billing/invoice.schema.json"), Path("types"))
        PosixPath('types/billing/invoice.d.ts')
    """
    stem = relative_schema_path.stem
    if stem.endswith(".schema"):
        stem = stem[: -len(".schema")]
    return output_dir / relative_schema_path.parent / f"{stem}{OUTPUT_SUFFIX}"


def discover_schema_files(schemas_dir: Path, patterns: Iterable[str]) -> list[Path]:
    """Find schema files under ``schemas_dir`` matching any of ``patterns``, sorted."""
    found = {path for pattern in patterns for path in schemas_dir.glob(pattern) if path.is_file()}
    return sorted(found)


def write_declarations(output_path: Path, content: str) -> None:
    """
    Write module text to ``output_path``, creating parent directories.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(output_path, f"cannot write file: {e}") from e


def convert_schema_file(
    schema_path: Path,
    output_path: Path,
    export_format: EnumExportFormat = EnumExportFormat.UNIQUE_EXPORTS,
    include_docs: bool = True,
) -> ModelConversionOutcome:
    """
    Convert one schema file into a declaration file.

    No file is written when the document yields no declarations.

    Raises:
        SchemaLoadError: If the schema cannot be loaded
        ReferenceCycleError: If the schema contains a reference cycle
        OutputWriteError: If the output cannot be written
    """
    schema = load_schema(schema_path)
    result = generate_declarations(schema, export_format=export_format, include_docs=include_docs)

    if not result.declarations:
        logger.info(
            f"No declarations generated for {schema_path}",
            extra={"schema_path": str(schema_path)},
        )
        return ModelConversionOutcome(schema_path=schema_path)

    write_declarations(output_path, render_module(result))
    logger.info(
        f"Generated: {output_path}",
        extra={
            "schema_path": str(schema_path),
            "output_path": str(output_path),
            "declarations": len(result.declarations),
        },
    )
    return ModelConversionOutcome(
        schema_path=schema_path,
        output_path=output_path,
        declaration_count=len(result.declarations),
    )


def convert_directory(
    schemas_dir: Path,
    output_dir: Path,
    export_format: EnumExportFormat = EnumExportFormat.UNIQUE_EXPORTS,
    include_docs: bool = True,
    patterns: Iterable[str] = DEFAULT_SCHEMA_PATTERNS,
) -> ModelConversionReport:
    """
    Convert every schema document under ``schemas_dir``.

    Failures are isolated per document: the error is logged and recorded in
    the report, and conversion continues with the next file.

    Args:
        schemas_dir: Directory searched recursively for schemas
        output_dir: Directory receiving the mirrored ``.d.ts`` files
        export_format: Which declarations to export from each file
        include_docs: Whether to emit JSDoc blocks
        patterns: Glob patterns selecting schema files

    Returns:
        One outcome per discovered schema file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    outcomes: list[ModelConversionOutcome] = []

    for schema_path in discover_schema_files(schemas_dir, patterns):
        relative_path = schema_path.relative_to(schemas_dir)
        try:
            outcome = convert_schema_file(
                schema_path,
                output_path_for(relative_path, output_dir),
                export_format=export_format,
                include_docs=include_docs,
            )
        except TypeGenerationError as e:
            logger.warning(
                f"Failed to process schema file {relative_path}: {e}",
                extra={"schema_path": str(schema_path), "error_type": type(e).__name__},
            )
            outcome = ModelConversionOutcome(schema_path=schema_path, error=str(e))
        outcomes.append(outcome)

    return ModelConversionReport(outcomes=outcomes)
