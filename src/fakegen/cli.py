"""Typer-based command line interface for inspecting sample data.

``fakegen sample CATEGORY`` prints random lines of a category and
``fakegen generate CATEGORY`` prints expanded ``CATEGORY_format`` templates.
``fakegen languages`` lists the bundled languages.

Exit codes
----------
0 success
3 resource read error (resource exists but cannot be read or decoded)
4 configuration error (invalid config file, unknown language)
5 no samples found for the category
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import load_config
from .generator import Generator
from .utils.errors import LanguageNotAvailableError, ResourceReadError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="fakegen",
    help="Fake data generator. Use 'fakegen sample' or 'fakegen generate' to print values.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _build_generator(
    *,
    config_path: Path | None,
    lang: str | None,
    fallback: bool | None,
    external: bool | None,
    data_dir: Path | None,
    seed: int | None,
) -> Generator:
    """Load configuration, apply CLI overrides and return a generator."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    cfg = cfg.model_copy(deep=True)
    if lang is not None:
        cfg.language = lang
    if fallback is not None:
        cfg.fallback = fallback
    if external is not None:
        cfg.data.external = external
    if data_dir is not None:
        cfg.data.root = data_dir
        if external is None:
            cfg.data.external = True
    if seed is not None:
        cfg.seed = seed

    try:
        return Generator(cfg)
    except LanguageNotAvailableError as exc:
        _safe_exit(4, str(exc))


def _emit(produce: Callable[[str], str | None], category: str, count: int) -> None:
    """Print ``count`` values of ``category`` or exit when none exist."""

    for _ in range(count):
        try:
            value = produce(category)
        except ResourceReadError as exc:
            _safe_exit(3, str(exc))
        if value is None:
            _safe_exit(5, f"No samples found for category: {category}")
        typer.echo(value)


@app.callback()
def main(
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log cache and fallback activity to stderr"
    ),
) -> None:
    """Entry point for the fakegen command group."""

    configure_logging(verbose)


@app.command()
def languages(
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List the languages bundled with the package."""

    gen = _build_generator(
        config_path=config_path,
        lang=None,
        fallback=None,
        external=None,
        data_dir=None,
        seed=None,
    )
    for language in gen.languages():
        typer.echo(language)


@app.command()
def sample(
    category: str = typer.Argument(..., help="Category name, e.g. 'cities'"),  # noqa: B008
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Language code"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),  # noqa: B008
    fallback: bool | None = typer.Option(  # noqa: B008
        None, "--fallback/--no-fallback", help="Toggle English fallback"
    ),
    external: bool | None = typer.Option(  # noqa: B008
        None, "--external/--embedded", help="Read data from disk instead of the package"
    ),
    data_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--data-dir", help="Directory holding data/<lang>/<category> files"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),  # noqa: B008
) -> None:
    """Print random samples of CATEGORY."""

    gen = _build_generator(
        config_path=config_path,
        lang=lang,
        fallback=fallback,
        external=external,
        data_dir=data_dir,
        seed=seed,
    )
    _emit(gen.lookup, category, count)


@app.command()
def generate(
    category: str = typer.Argument(..., help="Category name without '_format'"),  # noqa: B008
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Language code"),  # noqa: B008
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of values"),  # noqa: B008
    fallback: bool | None = typer.Option(  # noqa: B008
        None, "--fallback/--no-fallback", help="Toggle English fallback"
    ),
    external: bool | None = typer.Option(  # noqa: B008
        None, "--external/--embedded", help="Read data from disk instead of the package"
    ),
    data_dir: Optional[Path] = typer.Option(  # noqa: B008
        None, "--data-dir", help="Directory holding data/<lang>/<category> files"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),  # noqa: B008
) -> None:
    """Print values expanded from the CATEGORY_format templates."""

    gen = _build_generator(
        config_path=config_path,
        lang=lang,
        fallback=fallback,
        external=external,
        data_dir=data_dir,
        seed=seed,
    )
    _emit(gen.render, category, count)
