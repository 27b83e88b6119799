"""Console interface for the ``ach_entry`` package.

Reads NACHA files, pulls out Entry Detail records (with their addenda) and
either prints them as JSON or validates them. Environment (notably
``ACH_ENTRY_LOG_LEVEL``) is loaded from a local ``.env`` using
``python-dotenv`` before commands run. Record logic lives in
``ach_entry.entry_detail``; this module only handles I/O and exit codes.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .check_digit import calculate_check_digit
from .errors import FieldError
from .ingest import ParsedEntry, load_entries
from .logging_setup import configure_logging, get_logger

_logger = get_logger("ach_entry.cli")


def _load(path: Path) -> list[ParsedEntry] | None:
    try:
        return load_entries(path)
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {path}", file=sys.stderr)
    except UnicodeDecodeError as e:
        print(f"Error: '{path}' is not ASCII text: {e}", file=sys.stderr)
    return None


def _describe(error: FieldError) -> str:
    return f"{error.field_name}: {error.msg} (value={error.value!r})"


def cmd_show(path: str) -> int:
    """Print one JSON payload per entry; unreadable entries go to stderr."""

    entries = _load(Path(path))
    if entries is None:
        return 1
    status = 0
    for item in entries:
        if item.error is not None:
            print(f"Error: line {item.lineno}: {_describe(item.error)}", file=sys.stderr)
            status = 1
            continue
        if item.entry is None:
            continue
        try:
            payload = item.entry.to_payload()
        except ValueError as e:
            print(f"Error: line {item.lineno}: {e}", file=sys.stderr)
            status = 1
            continue
        print(payload.model_dump_json(by_alias=True))
    return status


def cmd_validate(path: str) -> int:
    """Validate every entry; print ``line <n>: ok`` or the first error."""

    entries = _load(Path(path))
    if entries is None:
        return 1
    failures = 0
    for item in entries:
        error = item.error
        if item.entry is not None:
            try:
                item.entry.validate()
            except FieldError as e:
                error = e
        if error is None:
            print(f"line {item.lineno}: ok")
        else:
            failures += 1
            print(f"line {item.lineno}: {_describe(error)}")
    _logger.info("validated %d entries, %d failed", len(entries), failures)
    return 1 if failures else 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Inspect and validate NACHA Entry Detail records.",
)

# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults).
PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--path",
    help="Path to a NACHA file (94-character lines)",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("show")
def show_cmd(path: Annotated[Path, PATH_OPTION]) -> None:
    """Print each entry detail record as JSON."""

    raise typer.Exit(cmd_show(str(path)))


@app.command("validate")
def validate_cmd(path: Annotated[Path, PATH_OPTION]) -> None:
    """Validate each entry detail record; exit 1 if any fails."""

    raise typer.Exit(cmd_validate(str(path)))


@app.command("check-digit")
def check_digit_cmd(
    identifier: Annotated[str, typer.Argument(help="8-digit routing identifier")],
) -> None:
    """Print the check digit for an 8-digit routing identifier."""

    try:
        digit = calculate_check_digit(identifier)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from e
    typer.echo(str(digit))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:  # pragma: no cover - console script entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    app()
