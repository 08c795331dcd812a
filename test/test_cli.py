"""Tests for the xdrgen CLI."""

import io
import os
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

import pytest

from xdrgen.cli import build_parser, main
from xdrgen.closure import ROOT_MAIN_TYPES
from xdrgen.config import MAIN_FILE_NAME_ENV
from xdrgen.errors import MissingConfigurationError
from xdrgen.writer import STATIC_FILES

CONFIGS = Path(__file__).parent / "configs"


def run_cli(*args: str) -> tuple[int | str, str, str]:
    """Run CLI in-process and capture output.

    Returns:
        tuple of (exit_code, stdout, stderr)
    """
    stdout_capture = io.StringIO()
    stderr_capture = io.StringIO()

    with redirect_stdout(stdout_capture), redirect_stderr(stderr_capture):
        try:
            exit_code = main(list(args))
        except SystemExit as e:
            exit_code = e.code if e.code is not None else 0

    return exit_code, stdout_capture.getvalue(), stderr_capture.getvalue()


@pytest.fixture(autouse=True)
def clear_main_file_env():
    """Keep the caller's environment out of the tests."""
    with patch.dict(os.environ):
        os.environ.pop(MAIN_FILE_NAME_ENV, None)
        yield


class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args(["schema.yml"])
        assert args.input == "schema.yml"
        assert args.main_file is None
        assert args.roots is None
        assert args.no_static is False
        assert args.date is None
        assert args.debug is False

    def test_main_file_from_env(self):
        with patch.dict(os.environ, {MAIN_FILE_NAME_ENV: "src/xdr.rs"}):
            args = build_parser().parse_args(["schema.yml"])
        assert args.main_file == "src/xdr.rs"

    def test_flag_overrides_env(self):
        with patch.dict(os.environ, {MAIN_FILE_NAME_ENV: "src/xdr.rs"}):
            args = build_parser().parse_args(["schema.yml", "--main-file", "other.rs"])
        assert args.main_file == "other.rs"

    def test_repeated_roots(self):
        args = build_parser().parse_args(["schema.yml", "-r", "A", "--root", "B"])
        assert args.roots == ["A", "B"]

    def test_date(self):
        args = build_parser().parse_args(["schema.yml", "--date", "2024-01-02"])
        assert args.date.isoformat() == "2024-01-02"


class TestMain:
    """Test running the CLI end to end."""

    def test_help(self):
        exit_code, stdout, _ = run_cli("--help")
        assert exit_code == 0
        assert "xdrgen" in stdout
        assert MAIN_FILE_NAME_ENV in stdout

    def test_missing_input_argument(self):
        exit_code, _, _ = run_cli()
        assert exit_code == 2

    def test_generate(self, tmp_path: Path):
        output = tmp_path / "crate"
        exit_code, _, _ = run_cli(
            str(CONFIGS / "stellar.yml"),
            "-o",
            str(output),
            "--main-file",
            "src/xdr.rs",
            "--date",
            "2024-01-02",
        )
        assert exit_code == 0
        content = (output / "src" / "xdr.rs").read_text()
        assert "generated on 2024-01-02" in content
        for filename in STATIC_FILES:
            assert (output / filename).exists()

    def test_generate_with_env(self, tmp_path: Path):
        with patch.dict(os.environ, {MAIN_FILE_NAME_ENV: "lib_types.rs"}):
            exit_code, _, _ = run_cli(
                str(CONFIGS / "stellar.yml"), "-o", str(tmp_path), "--no-static"
            )
        assert exit_code == 0
        assert [p.name for p in tmp_path.iterdir()] == ["lib_types.rs"]

    def test_custom_roots(self, tmp_path: Path):
        exit_code, _, _ = run_cli(
            str(CONFIGS / "example.yml"),
            "-o",
            str(tmp_path),
            "--main-file",
            "xdr.rs",
            "--root",
            "A",
            "--no-static",
        )
        assert exit_code == 0
        content = (tmp_path / "xdr.rs").read_text()
        assert content.count('#[cfg(feature = "all-types")]') == 1

    def test_missing_main_file(self, tmp_path: Path):
        output = tmp_path / "crate"
        exit_code, _, _ = run_cli(str(CONFIGS / "stellar.yml"), "-o", str(output))
        assert exit_code == 1
        assert not output.exists()

    def test_missing_main_file_debug_reraises(self, tmp_path: Path):
        with pytest.raises(MissingConfigurationError):
            run_cli(str(CONFIGS / "stellar.yml"), "-o", str(tmp_path), "-d")

    def test_missing_root_type(self, tmp_path: Path):
        output = tmp_path / "crate"
        exit_code, _, _ = run_cli(
            str(CONFIGS / "example.yml"),
            "-o",
            str(output),
            "--main-file",
            "xdr.rs",
        )
        assert exit_code == 1
        assert not output.exists()

    def test_missing_input_file(self, tmp_path: Path):
        exit_code, _, _ = run_cli(
            str(tmp_path / "missing.yml"), "-o", str(tmp_path), "--main-file", "xdr.rs"
        )
        assert exit_code == 1

    def test_default_roots_in_help(self):
        _, stdout, _ = run_cli("--help")
        assert ROOT_MAIN_TYPES[0] in stdout
