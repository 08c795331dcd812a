"""Errors raised while generating Rust XDR definitions."""


class XdrGenError(Exception):
    """Base class for all xdrgen errors."""


class MissingTypeError(XdrGenError, LookupError):
    """A root or dependency type name is absent from the type map."""

    def __init__(self, name: str):
        super().__init__(f"Type '{name}' is not defined in the schema")
        self.name = name


class MissingConfigurationError(XdrGenError):
    """A required configuration value was not provided."""

    def __init__(self, key: str, hint: str | None = None):
        message = f"Configuration value '{key}' not specified"
        if hint:
            message = f"{message} ({hint})"
        super().__init__(message)
        self.key = key
