"""Rendering of a resolved schema into one Rust compilation unit."""

import logging
from collections.abc import Mapping, Set
from datetime import date

from jinja2 import Environment

from .config import FEATURE_NAME, require_main_file_name
from .models import TypeDefinition
from .templates import MAIN_TEMPLATE, get_env

# Derived traits per composite kind; aliases get none
DERIVES: dict[str, tuple[str, ...]] = {
    "enum": ("Debug", "Copy", "Clone", "Eq", "PartialEq"),
    "struct": ("Debug", "Clone", "Eq", "PartialEq"),
    "union": ("Debug", "Clone", "Eq", "PartialEq"),
}


def emit(
    types: Mapping[str, TypeDefinition],
    constants: Mapping[str, int],
    reachable: Set[str],
    main_file_name: str | None,
    generated_on: date | None = None,
    env: Environment | None = None,
) -> str:
    """Render constants and types as Rust source.

    Types whose name is not in `reachable` are placed behind the `all-types`
    cargo feature. Types are emitted in the iteration order of `types`.

    Args:
        types: Ordered type map.
        constants: Integer constants.
        reachable: Names that are always compiled.
        main_file_name: Name of the file the output is destined for.
        generated_on: Date stamped into the header, defaults to today.
        env: Jinja2 environment, created on demand when omitted.

    Returns:
        The generated Rust source.

    Raises:
        MissingConfigurationError: If `main_file_name` is not set.
    """
    log = logging.getLogger("xdrgen")

    main_file_name = require_main_file_name(main_file_name)

    if generated_on is None:
        generated_on = date.today()
    if env is None:
        env = get_env()

    gated = sum(1 for name in types if name not in reachable)
    log.debug(
        f"Rendering {len(constants)} constants and {len(types)} types "
        f"({gated} behind feature '{FEATURE_NAME}') for {main_file_name}"
    )

    template = env.get_template(MAIN_TEMPLATE)
    return template.render(
        generated_on=generated_on.strftime("%Y-%m-%d"),
        constants=constants,
        types=types,
        reachable=reachable,
        derives=DERIVES,
        feature=FEATURE_NAME,
    )
