# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""
Generation Package - JSON Schema to TypeScript declaration utilities.

Provides the name-resolution and type-expression pipeline:
- TypeNameRegistry: Pointer to unique declaration name registry
- SchemaScanner: Three-pass registration of declaration-worthy locations
- TypeMapper: Primitive type and literal mapping
- ReferenceResolver: ``$ref`` resolution with cycle detection
- TypeExpressionBuilder: Recursive schema to type expression builder
- generate_type_definition / generate_declarations: Declaration generation
"""

from .build_context import TypeBuildContext
from .docblock import generate_docblock
from .generator import generate_declarations, generate_type_definition, render_module
from .naming import name_from_pointer, to_pascal_case
from .pointer_resolver import ROOT_POINTER, child_pointer, resolve_pointer, resolve_ref
from .reference_resolver import ReferenceResolver, RefInfo
from .schema_scanner import SchemaScanner, scan_schema
from .type_builder import TypeExpressionBuilder, has_object_definition
from .type_decider import get_declaration_parts, should_use_type_alias
from .type_mapper import TypeMapper
from .type_name_registry import RegistryEntry, TypeNameRegistry

__all__ = [
    # Registry and scanning
    "TypeNameRegistry",
    "RegistryEntry",
    "SchemaScanner",
    "scan_schema",
    # Pointers and naming
    "ROOT_POINTER",
    "child_pointer",
    "resolve_pointer",
    "resolve_ref",
    "name_from_pointer",
    "to_pascal_case",
    # Expression building
    "TypeBuildContext",
    "TypeExpressionBuilder",
    "TypeMapper",
    "ReferenceResolver",
    "RefInfo",
    "has_object_definition",
    # Declarations
    "generate_docblock",
    "generate_declarations",
    "generate_type_definition",
    "get_declaration_parts",
    "render_module",
    "should_use_type_alias",
]
