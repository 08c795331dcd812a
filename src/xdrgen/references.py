"""Rendering of XDR type references as Rust types."""

from .models import Primitive, ReferenceKind, TypeReference

RUST_PRIMITIVES = {
    Primitive.INT: "i32",
    Primitive.UNSIGNED_INT: "u32",
    Primitive.HYPER: "i64",
    Primitive.UNSIGNED_HYPER: "u64",
    Primitive.BOOL: "bool",
    Primitive.FLOAT: "f32",
    Primitive.DOUBLE: "f64",
    Primitive.VOID: "()",
}


def rust_type(reference: TypeReference) -> str:
    """Render a type reference the way the generated crate spells it.

    Variable-length data maps onto the compound types of the static runtime
    (`LimitedVarOpaque<N>`, `UnlimitedString`, `LimitedVarArray<T, N>`, ...),
    fixed-length data onto Rust arrays.
    """
    kind = reference.kind

    if kind == ReferenceKind.PRIMITIVE:
        return RUST_PRIMITIVES[Primitive(reference.name)]
    if kind == ReferenceKind.SIMPLE:
        return str(reference.name)

    if kind == ReferenceKind.OPAQUE:
        if reference.fixed:
            return f"[u8; {reference.length}]"
        if reference.length is None:
            return "UnlimitedVarOpaque"
        return f"LimitedVarOpaque<{reference.length}>"

    if kind == ReferenceKind.STRING:
        if reference.length is None:
            return "UnlimitedString"
        return f"LimitedString<{reference.length}>"

    assert reference.element is not None
    element = rust_type(reference.element)

    if kind == ReferenceKind.OPTIONAL:
        return f"Option<{element}>"

    if reference.fixed:
        return f"[{element}; {reference.length}]"
    if reference.length is None:
        return f"UnlimitedVarArray<{element}>"
    return f"LimitedVarArray<{element}, {reference.length}>"


def referenced_names(reference: TypeReference) -> set[str]:
    """Return the named schema types a reference depends on."""
    if reference.kind == ReferenceKind.SIMPLE:
        return {str(reference.name)}
    if reference.element is not None:
        return referenced_names(reference.element)
    return set()
