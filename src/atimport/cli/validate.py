"""CLI command: atimport validate -- report malformed @import rules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from atimport.cli.common import build_loader_context, build_options, import_options
from atimport.engine import ImportParser
from atimport.model.diagnostic import Severity
from atimport.stylesheet import parse_stylesheet
from atimport.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True, help="Treat warnings as errors")
@click.option("--css-stylesheet", is_flag=True, help="Disallow @import entirely")
@import_options
def validate(
    cssfile: str,
    strict: bool,
    css_stylesheet: bool,
    absolute_urls: bool,
    data_urls: bool,
    externals: tuple[str, ...],
) -> None:
    """Check the @import rules of a stylesheet.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors (or warnings, with --strict).
    """
    css_path = Path(cssfile)
    options = build_options(absolute_urls, data_urls, externals, is_css_stylesheet=css_stylesheet)
    loader_context = build_loader_context(css_path)

    root = parse_stylesheet(css_path.read_text(encoding="utf-8"), path=str(css_path))
    parser = ImportParser(options)
    parser.report_parse_errors(root, loader_context)
    parsed = parser.collect(apply_transforms(root), loader_context)
    diagnostics = loader_context.diagnostics

    if not diagnostics:
        click.echo(f"OK: {css_path.name} has {len(parsed)} valid @import rule(s)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors or (strict and warnings):
        sys.exit(1)
    sys.exit(0)
