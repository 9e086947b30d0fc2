# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
TypeScript declaration generator.

Orchestrates scanning and expression building for one schema document:

1. Scan the document into a fresh :class:`TypeNameRegistry`
2. Generate one declaration per surviving registration, in pointer order
3. Select the names to export

Each call works on its own registry, so documents can be converted
independently (and concurrently) without coordination.
"""

from __future__ import annotations

import logging
from typing import Any

from omnitypes.generation.docblock import generate_docblock
from omnitypes.generation.pointer_resolver import ROOT_POINTER, resolve_pointer
from omnitypes.generation.schema_scanner import scan_schema
from omnitypes.generation.type_builder import TypeExpressionBuilder
from omnitypes.generation.type_decider import get_declaration_parts, should_use_type_alias
from omnitypes.generation.type_name_registry import TypeNameRegistry
from omnitypes.models import EnumExportFormat, ModelGenerationResult, ModelTypeDeclaration

logger = logging.getLogger(__name__)


def generate_type_definition(
    name: str,
    schema: dict[str, Any],
    root_schema: dict[str, Any],
    registry: TypeNameRegistry | None = None,
    pointer: str = ROOT_POINTER,
    include_docs: bool = True,
    builder: TypeExpressionBuilder | None = None,
) -> ModelTypeDeclaration:
    """
    Generate a complete TypeScript declaration for one schema fragment.

    The fragment's own pointer is not looked up in the registry, otherwise
    the declaration would resolve to its own name.

    Args:
        name: Declaration name
        schema: Fragment to declare
        root_schema: Document containing the fragment (for ``$ref`` resolution)
        registry: Registry of names for the document
        pointer: Location of ``schema`` in ``root_schema``
        include_docs: Whether to prepend the JSDoc block
        builder: Expression builder to reuse across declarations

    Returns:
        The declaration.

    Raises:
        ReferenceCycleError: If the fragment's references loop back on themselves
    """
    if builder is None:
        builder = TypeExpressionBuilder(root_schema, registry)

    type_definition = builder.build_schema(schema, pointer=pointer, lookup_in_registry=False)
    is_type_alias = should_use_type_alias(schema, type_definition)
    keyword, separator = get_declaration_parts(is_type_alias)
    doc = generate_docblock(schema) if include_docs else ""

    return ModelTypeDeclaration(
        pointer=pointer,
        name=name,
        definition=f"{doc}{keyword} {name}{separator}{type_definition}",
        is_type_alias=is_type_alias,
    )


def generate_declarations(
    schema: dict[str, Any],
    export_format: EnumExportFormat = EnumExportFormat.UNIQUE_EXPORTS,
    include_docs: bool = True,
) -> ModelGenerationResult:
    """
    Generate every declaration for a schema document.

    Args:
        schema: The parsed schema document
        export_format: Which declarations to export
        include_docs: Whether to emit JSDoc blocks

    Returns:
        Declarations ordered by pointer, plus the names to export.

    Raises:
        ReferenceCycleError: If the document contains a reference cycle
    """
    registry = TypeNameRegistry()
    scan_schema(schema, registry)

    builder = TypeExpressionBuilder(schema, registry)
    declarations: list[ModelTypeDeclaration] = []
    registered = registry.get_all()

    for pointer in sorted(registered):
        fragment = resolve_pointer(schema, pointer)
        if not isinstance(fragment, dict):
            logger.debug(
                f"No fragment for dangling reference, not declared: {pointer}",
                extra={"pointer": pointer, "name": registered[pointer]},
            )
            continue

        declarations.append(
            generate_type_definition(
                name=registered[pointer],
                schema=fragment,
                root_schema=schema,
                registry=registry,
                pointer=pointer,
                include_docs=include_docs,
                builder=builder,
            )
        )

    exported_names = _select_exports(declarations, registry, export_format)

    logger.debug(
        f"Generated {len(declarations)} declarations",
        extra={
            "declarations": len(declarations),
            "exports": len(exported_names),
            "export_format": export_format.value,
        },
    )
    return ModelGenerationResult(declarations=declarations, exported_names=exported_names)


def _select_exports(
    declarations: list[ModelTypeDeclaration],
    registry: TypeNameRegistry,
    export_format: EnumExportFormat,
) -> list[str]:
    if export_format == EnumExportFormat.ROOT_ONLY:
        root_name = registry.get(ROOT_POINTER)
        if root_name is None:
            logger.warning("ROOT_ONLY export requested but the document root has no declaration")
            return []
        return [root_name]

    # dict.fromkeys keeps declaration order while dropping duplicates
    return list(dict.fromkeys(declaration.name for declaration in declarations))


def render_module(result: ModelGenerationResult) -> str:
    """
    Render generated declarations and export statements as module text.

    Returns:
        Declarations separated by blank lines, followed by one
        ``export { Name };`` line per exported name.
    """
    body = "\n\n".join(declaration.definition for declaration in result.declarations)
    if not result.exported_names:
        return f"{body}\n"
    exports = "\n".join(f"export {{ {name} }};" for name in result.exported_names)
    return f"{body}\n\n{exports}\n"
