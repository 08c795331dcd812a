"""Writing the generated crate to disk."""

import logging
import shutil
from pathlib import Path

from .config import require_main_file_name

# Directory with the runtime files shipped next to the generated source
STATIC_PATH = Path(__file__).parent / "static"

# Copied verbatim into every output directory
STATIC_FILES = (
    "src/xdr_codec.rs",
    "src/streams.rs",
    "src/lib.rs",
    "src/compound_types.rs",
    "Cargo.toml",
    "README.md",
)


def ensure_output_dir(output_path: Path) -> Path:
    """Ensure output directory exists, creating it if necessary."""
    log = logging.getLogger("xdrgen")

    output_path = Path(output_path).resolve()
    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory {output_path.parent} does not exist")
    elif not output_path.parent.is_dir():
        raise FileNotFoundError(
            f"Output directory {output_path.parent} is not a directory"
        )
    elif not output_path.exists():
        log.debug(f"Creating output directory {output_path}")
        output_path.mkdir(exist_ok=True, parents=True)

    return output_path


def write_definition(content: str, output_path: Path, main_file_name: str | None) -> str:
    """Write the generated source to `output_path / main_file_name`.

    Args:
        content: Generated Rust source.
        output_path: Output directory.
        main_file_name: File name relative to the output directory, may
            contain subdirectories (e.g. "src/xdr.rs").

    Returns:
        The written file name.

    Raises:
        MissingConfigurationError: If `main_file_name` is not set.
    """
    log = logging.getLogger("xdrgen")

    main_file_name = require_main_file_name(main_file_name)
    output_file = Path(output_path) / main_file_name
    output_file.parent.mkdir(parents=True, exist_ok=True)

    log.debug(f"Writing generated definitions to '{main_file_name}'")
    with open(output_file, "w") as f:
        f.write(content)

    return main_file_name


def copy_static_files(output_path: Path, static_path: Path = STATIC_PATH) -> list[str]:
    """Copy the fixed runtime files into the output directory.

    Args:
        output_path: Output directory.
        static_path: Directory the files are copied from.

    Returns:
        List of copied file names, relative to the output directory.
    """
    log = logging.getLogger("xdrgen")

    output_path = Path(output_path)
    created_dirs: set[Path] = set()
    copied = []

    for filename in STATIC_FILES:
        directory = (output_path / filename).parent
        if directory not in created_dirs:
            directory.mkdir(parents=True, exist_ok=True)
            created_dirs.add(directory)

        log.debug(f"Copying static file '{filename}'")
        shutil.copyfile(static_path / filename, output_path / filename)
        copied.append(filename)

    return copied
