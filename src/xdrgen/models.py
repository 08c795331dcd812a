"""Schema models for parsed XDR definitions.

The upstream XDR parser dumps its result as a YAML document; these models
validate that document into a type map and a constant map:

    name: Stellar
    constants:
      MASK_ACCOUNT_FLAGS: 7
    types:
      AccountID:
        kind: alias
        target: PublicKey
      Signer:
        kind: struct
        members:
          key: SignerKey
          weight: unsigned int
        definition: "pub struct Signer { ... }"
        implementation: "fn to_xdr_buffered(...) { ... }"

The order of `types` is significant: definitions are emitted in the order
they appear in the document.
"""

import re
from enum import StrEnum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class Primitive(StrEnum):
    """XDR primitive types."""

    INT = "int"
    UNSIGNED_INT = "unsigned int"
    HYPER = "hyper"
    UNSIGNED_HYPER = "unsigned hyper"
    BOOL = "bool"
    FLOAT = "float"
    DOUBLE = "double"
    VOID = "void"


PRIMITIVES = frozenset(p.value for p in Primitive)


class ReferenceKind(StrEnum):
    """Shape of a type reference."""

    PRIMITIVE = "primitive"
    SIMPLE = "simple"
    OPAQUE = "opaque"
    STRING = "string"
    ARRAY = "array"
    OPTIONAL = "optional"


_SHORTHAND = re.compile(
    r"^(?P<base>[A-Za-z_][A-Za-z0-9_]*(?: [A-Za-z_][A-Za-z0-9_]*)?)\s*"
    r"(?:\[\s*(?P<fixed>\d+)\s*\]|<\s*(?P<var>\d*)\s*>|(?P<optional>\*))?$"
)


def parse_reference(text: str) -> dict[str, Any]:
    """Parse a shorthand type reference into its mapping form.

    Examples:
    - "int" -> primitive int
    - "AccountID" -> simple reference
    - "opaque[32]" / "opaque<64>" / "opaque<>" -> opaque data
    - "string<28>" / "string<>" -> string
    - "Signer[20]" / "Signer<20>" / "Signer<>" -> array of Signer
    - "Signer*" -> optional Signer
    """
    match = _SHORTHAND.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid type reference '{text}'")

    base = match.group("base")
    fixed = match.group("fixed")
    var = match.group("var")
    optional = match.group("optional") is not None
    has_suffix = fixed is not None or var is not None or optional

    if base == "opaque":
        if not has_suffix or optional:
            raise ValueError(f"Opaque reference '{text}' needs a length")
        length = fixed if fixed is not None else var
        return {
            "kind": ReferenceKind.OPAQUE,
            "fixed": fixed is not None,
            "length": int(length) if length else None,
        }

    if base == "string":
        if var is None:
            raise ValueError(f"String reference '{text}' needs a <length>")
        return {"kind": ReferenceKind.STRING, "length": int(var) if var else None}

    if base in PRIMITIVES:
        element: dict[str, Any] = {"kind": ReferenceKind.PRIMITIVE, "name": base}
    elif " " in base:
        raise ValueError(f"Invalid type reference '{text}'")
    else:
        element = {"kind": ReferenceKind.SIMPLE, "name": base}

    if optional:
        return {"kind": ReferenceKind.OPTIONAL, "element": element}
    if fixed is not None:
        return {
            "kind": ReferenceKind.ARRAY,
            "element": element,
            "fixed": True,
            "length": int(fixed),
        }
    if var is not None:
        return {
            "kind": ReferenceKind.ARRAY,
            "element": element,
            "fixed": False,
            "length": int(var) if var else None,
        }
    return element


class TypeReference(BaseModel):
    """A reference from a member, union arm or alias to another type."""

    kind: ReferenceKind
    name: Optional[str] = None
    element: Optional["TypeReference"] = None
    fixed: bool = False
    length: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def parse_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return parse_reference(data)
        return data

    @model_validator(mode="after")
    def check_shape(self) -> "TypeReference":
        if self.kind == ReferenceKind.PRIMITIVE:
            if self.name not in PRIMITIVES:
                raise ValueError(f"Unknown primitive type '{self.name}'")
        elif self.kind == ReferenceKind.SIMPLE:
            if not self.name:
                raise ValueError("Simple reference needs a type name")
        elif self.kind in (ReferenceKind.ARRAY, ReferenceKind.OPTIONAL):
            if self.element is None:
                raise ValueError(f"{self.kind} reference needs an element type")

        if self.fixed and self.length is None:
            raise ValueError(f"Fixed-length {self.kind} reference needs a length")
        return self


class _Definition(BaseModel):
    # Filled in from the type map key by XdrSchema
    name: str = ""


class AliasDefinition(_Definition):
    """A typedef: `pub type Name = <target>;`."""

    kind: Literal["alias"] = "alias"
    target: TypeReference


class _CompositeDefinition(_Definition):
    # Pre-rendered Rust fragments, positioned verbatim
    definition: str
    implementation: str


class EnumDefinition(_CompositeDefinition):
    """An XDR enum."""

    kind: Literal["enum"] = "enum"
    members: dict[str, int] = Field(default_factory=dict)


class StructDefinition(_CompositeDefinition):
    """An XDR struct."""

    kind: Literal["struct"] = "struct"
    members: dict[str, TypeReference] = Field(default_factory=dict)


class UnionDefinition(_CompositeDefinition):
    """An XDR discriminated union."""

    kind: Literal["union"] = "union"
    discriminant: TypeReference
    arms: dict[str, TypeReference] = Field(default_factory=dict)


TypeDefinition = Annotated[
    Union[AliasDefinition, EnumDefinition, StructDefinition, UnionDefinition],
    Field(discriminator="kind"),
]

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


class XdrSchema(BaseModel):
    """A parsed XDR schema: ordered type map plus integer constants."""

    name: Optional[str] = None
    types: dict[str, TypeDefinition] = Field(default_factory=dict)
    constants: dict[str, Int32] = Field(default_factory=dict)

    @model_validator(mode="after")
    def assign_type_names(self) -> "XdrSchema":
        for key, definition in self.types.items():
            if definition.name and definition.name != key:
                raise ValueError(
                    f"Type '{key}' declares a different name '{definition.name}'"
                )
            definition.name = key
        return self
