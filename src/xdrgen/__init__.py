"""xdrgen - Rust XDR definition generator.

Turns a parsed XDR schema (type definitions plus integer constants) into a
Rust crate. Types reachable from the root types are always compiled, all
others are gated behind the `all-types` cargo feature.

Example usage:
    >>> from xdrgen import XdrGenerator
    >>>
    >>> xdr_gen = XdrGenerator(Path("output"), main_file_name="src/xdr.rs")
    >>> filenames = xdr_gen.generate_from_file(Path("stellar.yml"))

Or step by step:
    >>> from xdrgen import resolve, emit
    >>>
    >>> reachable = resolve(schema.types, ["TransactionEnvelope"])
    >>> source = emit(schema.types, schema.constants, reachable, "src/xdr.rs")
"""

from .closure import ROOT_MAIN_TYPES, determine_dependencies, resolve
from .config import FEATURE_NAME, MAIN_FILE_NAME_ENV
from .emitter import DERIVES, emit
from .errors import MissingConfigurationError, MissingTypeError, XdrGenError
from .generator import XdrGenerator
from .models import (
    AliasDefinition,
    EnumDefinition,
    StructDefinition,
    TypeDefinition,
    TypeReference,
    UnionDefinition,
    XdrSchema,
)
from .naming import constant_case
from .references import rust_type
from .writer import STATIC_FILES, copy_static_files, write_definition

__all__ = [
    # Core
    "XdrGenerator",
    "resolve",
    "determine_dependencies",
    "emit",
    "ROOT_MAIN_TYPES",
    "DERIVES",
    "FEATURE_NAME",
    "MAIN_FILE_NAME_ENV",
    # Models
    "XdrSchema",
    "TypeDefinition",
    "TypeReference",
    "AliasDefinition",
    "EnumDefinition",
    "StructDefinition",
    "UnionDefinition",
    # Errors
    "XdrGenError",
    "MissingTypeError",
    "MissingConfigurationError",
    # Utilities
    "constant_case",
    "rust_type",
    "write_definition",
    "copy_static_files",
    "STATIC_FILES",
]
