# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Command line interface: print the secret held by each share document."""

from __future__ import annotations

import click

from .config import settings
from .errors import SecretFinderError
from .ingest import FORMATS, load_document
from .recovery import find_secret
from .utils.logging import configure

DEFAULT_FILES = ("testcase1.json", "testcase2.json")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS),
    default="auto",
    show_default=True,
    help="Share document format; auto picks YAML for .yaml/.yml files.",
)
@click.option(
    "--allow-rounding/--strict",
    default=settings.allow_rounding,
    show_default=True,
    help="Round a non-integer interpolation instead of failing.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=settings.log_level,
    show_default=True,
)
def main(files: tuple[str, ...], fmt: str, allow_rounding: bool, log_level: str) -> None:
    """Reconstruct secrets from FILES (default: testcase1.json testcase2.json)."""
    configure(log_level.upper())
    for i, path in enumerate(files or DEFAULT_FILES, 1):
        try:
            spec, shares = load_document(path, fmt)
            secret = find_secret(shares, spec, allow_rounding=allow_rounding)
        except SecretFinderError as exc:
            raise click.ClickException(f"{path}: {exc}") from exc
        click.echo(f"Secret {i}: {secret}")


if __name__ == "__main__":
    main()
