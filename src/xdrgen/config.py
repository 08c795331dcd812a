"""Configuration values shared by the library and the CLI."""

from .errors import MissingConfigurationError

# Environment variable holding the name of the generated Rust file
MAIN_FILE_NAME_ENV = "XDRGEN_MAIN_FILE_NAME"

# Cargo feature gating every type outside the root closure
FEATURE_NAME = "all-types"


def require_main_file_name(main_file_name: str | None) -> str:
    """Return the output file name, failing if it was not configured."""
    if not main_file_name:
        raise MissingConfigurationError(
            "main_file_name", f"pass --main-file or set {MAIN_FILE_NAME_ENV}"
        )
    return main_file_name
