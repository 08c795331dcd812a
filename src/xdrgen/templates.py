"""Template environment for the generated Rust source."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .naming import constant_case
from .references import rust_type

# Directory with the Jinja2 templates shipped in the package
TEMPLATES_PATH = Path(__file__).parent / "jinja"

MAIN_TEMPLATE = "xdr.rs.j2"


def get_env(templates_path: Path = TEMPLATES_PATH) -> Environment:
    """Create a Jinja2 environment with the Rust rendering filters installed."""
    env = Environment(
        loader=FileSystemLoader(templates_path),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["constant_case"] = constant_case
    env.filters["rust_type"] = rust_type
    return env
