"""Identifier naming helpers."""

import re

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def constant_case(name: str) -> str:
    """Convert an identifier to CONSTANT_CASE.

    Examples:
    - maskAccountFlags -> MASK_ACCOUNT_FLAGS
    - MASK_ACCOUNT_FLAGS_V17 -> MASK_ACCOUNT_FLAGS_V17
    - XDRMaxLength -> XDR_MAX_LENGTH
    """
    words = _NON_ALNUM.sub(" ", _WORD_BOUNDARY.sub(" ", name)).split()
    return "_".join(word.upper() for word in words)
