"""Code generation orchestration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment

from . import closure, emitter, writer
from .closure import ROOT_MAIN_TYPES
from .config import require_main_file_name
from .models import XdrSchema
from .templates import get_env


class XdrGenerator:
    """Orchestrates generation of a Rust XDR crate from a parsed schema.

    This class encapsulates the entire generation workflow:
    1. Parse and validate the YAML schema
    2. Resolve the always-compiled root closure
    3. Render the Rust source
    4. Write it and copy the static runtime files

    Example:
        >>> from xdrgen.generator import XdrGenerator
        >>>
        >>> xdr_gen = XdrGenerator(Path("output"), main_file_name="src/xdr.rs")
        >>> filenames = xdr_gen.generate_from_file(Path("stellar.yml"))
    """

    def __init__(
        self,
        output_path: Path,
        main_file_name: str | None = None,
        roots: Iterable[str] = ROOT_MAIN_TYPES,
        generated_on: date | None = None,
    ):
        """Initialize the generator.

        Args:
            output_path: Path to the output directory.
            main_file_name: Name of the generated Rust file in the output directory.
            roots: Type names whose closure is always compiled.
            generated_on: Date stamped into the generated header, defaults to today.
        """
        self.output_path = Path(output_path).resolve()
        self.main_file_name = main_file_name
        self.roots = tuple(roots)
        self.generated_on = generated_on
        self._env: Environment | None = None
        self._log = logging.getLogger("xdrgen")

    @property
    def env(self) -> Environment:
        """Get or create the Jinja2 environment."""
        if self._env is None:
            self._env = get_env()
        return self._env

    def parse_yaml(self, input_path: Path) -> dict[str, Any]:
        """Parse a YAML file and return the data as a dictionary.

        Raises:
            FileNotFoundError: If the file doesn't exist or isn't a YAML file.
            RuntimeError: If parsing fails.
        """
        input_path = Path(input_path).resolve()

        if not input_path.exists():
            raise FileNotFoundError(f"Input file {input_path} does not exist")
        if not input_path.is_file():
            raise FileNotFoundError(f"Input file {input_path} is not a file")
        if input_path.suffix not in [".yml", ".yaml"]:
            raise FileNotFoundError(f"Input file {input_path} is not a YAML file")

        self._log.info(f"Loading YAML file from {input_path.as_posix()}")

        try:
            with open(input_path, "r") as file:
                data = yaml.safe_load(file)
        except Exception as e:
            raise RuntimeError("Failed to load YAML file") from e

        return data

    def validate(self, data: dict[str, Any]) -> XdrSchema:
        """Validate YAML data into a schema.

        Raises:
            RuntimeError: If validation fails.
        """
        self._log.debug("Validating XDR schema")

        try:
            return XdrSchema.model_validate(data)
        except Exception as e:
            self._log.error(f"Failed to validate schema: {e}")
            raise RuntimeError("Failed to validate schema") from e

    def resolve(self, schema: XdrSchema) -> frozenset[str]:
        """Resolve the always-compiled types of a schema."""
        return closure.resolve(schema.types, self.roots)

    def emit(self, schema: XdrSchema, reachable: frozenset[str]) -> str:
        """Render the Rust source for a schema."""
        return emitter.emit(
            schema.types,
            schema.constants,
            reachable,
            self.main_file_name,
            generated_on=self.generated_on,
            env=self.env,
        )

    def generate(self, schema: XdrSchema, copy_static: bool = True) -> list[str]:
        """Generate the crate from a validated schema.

        Nothing is written unless both the configuration and the root closure
        are complete.

        Args:
            schema: Validated schema.
            copy_static: Whether to copy the static runtime files.

        Returns:
            List of written filenames, relative to the output directory.
        """
        main_file_name = require_main_file_name(self.main_file_name)

        reachable = self.resolve(schema)
        self._log.info(
            f"{len(reachable)} of {len(schema.types)} types are always compiled"
        )
        content = self.emit(schema, reachable)

        output_path = writer.ensure_output_dir(self.output_path)
        self._log.info(f"Writing outputs to {output_path.as_posix()}")

        filenames = [writer.write_definition(content, output_path, main_file_name)]
        if copy_static:
            filenames.extend(writer.copy_static_files(output_path))

        self._log.info(f"Wrote {len(filenames)} files: {', '.join(filenames)}")
        return filenames

    def generate_from_file(self, input_path: Path, copy_static: bool = True) -> list[str]:
        """Parse a YAML schema file and generate the crate.

        This is the main entry point for file-based generation.
        """
        data = self.parse_yaml(input_path)
        schema = self.validate(data)
        return self.generate(schema, copy_static=copy_static)
