"""
Command-line interface for the MCP checker JUnit converter.

Reads MCP checker JSON results from a file or stdin and writes JUnit XML to stdout.
"""

import sys
from pathlib import Path
from typing import Optional

import typer

from mcpchecker_junit.core.config import Config
from mcpchecker_junit.core.errors import (
    ConfigurationError,
    FileOpenError,
    InputReadError,
    DecodeError,
    SerializeError,
)
from mcpchecker_junit.core.logging import get_logger, setup_logger
from mcpchecker_junit.reporting.generator import convert_bytes

app = typer.Typer(
    name="mcpchecker-junit-report",
    help="Convert MCP checker results (JSON) into a JUnit XML report",
    add_completion=False,
)


def read_input(input_path: Optional[Path]) -> bytes:
    """Read the whole input from ``input_path``, or from stdin when it is None."""
    if input_path is None:
        try:
            return sys.stdin.buffer.read()
        except OSError as e:
            raise InputReadError(f"Error reading input: {e}") from e

    try:
        handle = open(input_path, "rb")
    except OSError as e:
        raise FileOpenError(f"Error opening file {input_path}: {e}") from e

    with handle:
        try:
            return handle.read()
        except OSError as e:
            raise InputReadError(f"Error reading input: {e}") from e


def get_config(
    input_path: Optional[Path] = None,
    verbosity: Optional[int] = None,
    log_file: Optional[Path] = None,
    config_file: Optional[Path] = None,
) -> Config:
    """Create Config from CLI options; unset options fall back to the config file."""
    return Config(
        input_path=input_path,
        verbosity=verbosity,
        log_file=log_file,
        config_file=config_file,
    )


@app.command()
def convert(
    input_file: Optional[Path] = typer.Argument(None, help="MCP checker results JSON (default: stdin)"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to mcpchecker_junit.toml"),
):
    """Convert MCP checker results to JUnit XML on stdout."""
    try:
        config = get_config(
            input_path=input_file, verbosity=verbosity, log_file=log_file, config_file=config_file,
        )
    except ConfigurationError as e:
        typer.echo(f"Error in configuration: {e}", err=True)
        sys.exit(1)

    try:
        setup_logger(verbosity=config.verbosity, log_file=config.log_file)
    except OSError as e:
        typer.echo(f"Error opening log file {config.log_file}: {e}", err=True)
        sys.exit(1)
    logger = get_logger(__name__)
    logger.info(f"Reading results from {config.input_path or 'stdin'}")

    try:
        data = read_input(config.input_path)
        output = convert_bytes(data)
    except (FileOpenError, InputReadError) as e:
        typer.echo(str(e), err=True)
        sys.exit(1)
    except DecodeError as e:
        typer.echo(f"Error parsing JSON: {e}", err=True)
        sys.exit(1)
    except SerializeError as e:
        typer.echo(f"Error generating XML: {e}", err=True)
        sys.exit(1)

    # The declaration says UTF-8, whatever the locale encoding of stdout is
    sys.stdout.flush()
    sys.stdout.buffer.write(output.encode("utf-8"))
    sys.stdout.buffer.flush()


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
