"""Typer-based command line interface for the pattern catalog.

Commands
--------
``list``      print every category with a short description
``check``     test values against a single category
``identify``  report every category each value belongs to

Values are taken from the command line, from ``--file`` (one per line), or
both.  Results go to stdout as tab separated lines; diagnostics go to stderr.

Exit codes
----------
0 success (``check``: every value matched)
1 at least one value did not match (``check`` only)
2 unknown category or no values supplied
3 I/O error reading ``--file`` or ``--config``
4 invalid configuration (bad YAML or schema violation)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .io import read_values
from .rules.catalog import CATALOG, categories, get_rule, identify as identify_categories
from .utils.errors import ConfigError, UnknownCategoryError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

logger = get_logger(__name__)

app = typer.Typer(
    name="regex-collection",
    help="Check strings against a fixed catalog of formats. See 'regex-collection list'.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and set up logging, exiting with 3 or 4 on failure."""

    try:
        cfg = load_config(config_path)
    except OSError as exc:
        _safe_exit(3, str(exc))
    except (ValidationError, ConfigError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    logger.debug("loaded config (schema_version=%s)", cfg.schema_version)
    return cfg


def _collect(values: list[str] | None, file: Path | None, cfg: ConfigModel) -> list[str]:
    """Merge positional values with values read from ``file``."""

    collected = list(values or [])
    if file is not None:
        try:
            from_file = read_values(
                file,
                strip_whitespace=cfg.input.strip_whitespace,
                skip_blank=cfg.input.skip_blank,
            )
        except (OSError, UnicodeDecodeError) as exc:
            _safe_exit(3, str(exc))
        logger.info("read %d values from %s", len(from_file), file)
        collected.extend(from_file)
    if not collected:
        _safe_exit(2, "no values given; pass VALUE arguments or --file")
    return collected


def _fmt(value: bool) -> str:
    return "true" if value else "false"


@app.command("list")
def list_categories() -> None:
    """List every category id with its description."""

    for name in categories():
        typer.echo(f"{name}\t{CATALOG[name].description}")


@app.command()
def check(
    category: str = typer.Argument(..., help="Category id, see 'regex-collection list'"),
    values: Optional[list[str]] = typer.Argument(None, help="Values to check"),  # noqa: B008
    file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--file", "-f", help="Read additional values from a file, one per line"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Check each value against CATEGORY; exit 1 if any value does not match."""

    cfg = _load(config_path, verbose)
    try:
        rule = get_rule(category)
    except UnknownCategoryError as exc:
        _safe_exit(2, str(exc))

    failures = 0
    for value in _collect(values, file, cfg):
        ok = rule.matches(value)
        failures += not ok
        typer.echo(f"{value}\t{_fmt(ok)}")
    logger.debug("%s: %d failures", category, failures)
    if failures:
        _safe_exit(1)


@app.command()
def identify(
    values: Optional[list[str]] = typer.Argument(None, help="Values to identify"),  # noqa: B008
    file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--file", "-f", help="Read additional values from a file, one per line"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logging to stderr"
    ),
) -> None:
    """Print the categories each value belongs to, or '-' when none match."""

    cfg = _load(config_path, verbose)
    subset = cfg.identify.categories or None
    for value in _collect(values, file, cfg):
        found = identify_categories(value, subset)
        typer.echo(f"{value}\t{','.join(found) if found else '-'}")
