"""CLI command: atimport resolve -- run the full import pipeline on a file."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click

from atimport.cli.common import (
    build_loader_context,
    build_options,
    configure_logging,
    import_options,
)
from atimport.engine import ImportParser
from atimport.model.records import ImportParseResult


def _echo_text(result: ImportParseResult) -> None:
    click.echo(f"Imports: {len(result.imports)}")
    for record in result.imports:
        click.echo(f"  [{record.index}] {record.import_name} <- {record.url}")
    click.echo()

    click.echo(f"Apply: {len(result.api)}")
    for record in result.api:
        parts = [f"  [{record.index}] {record.import_name or record.url}"]
        if record.layer is not None:
            parts.append(f'layer="{record.layer}"')
        if record.supports is not None:
            parts.append(f'supports="{record.supports}"')
        if record.media is not None:
            parts.append(f'media="{record.media}"')
        click.echo("  ".join(parts))

    if result.diagnostics:
        click.echo()
        for diag in result.diagnostics:
            click.echo(str(diag))


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--root-context", default=None, help="Directory that root-relative imports resolve against")
@click.option("--report-unresolved", is_flag=True, help="Warn about imports that cannot be resolved")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--emit-css", is_flag=True, help="Include the rewritten stylesheet")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@import_options
def resolve(
    cssfile: str,
    root_context: str | None,
    report_unresolved: bool,
    as_json: bool,
    emit_css: bool,
    verbose: bool,
    absolute_urls: bool,
    data_urls: bool,
    externals: tuple[str, ...],
) -> None:
    """Resolve the @import rules of a stylesheet against the file system.

    Prints the dependency list and the apply records in document order.
    Exits with code 1 if any error diagnostics were reported.
    """
    configure_logging(verbose)
    css_path = Path(cssfile)
    options = build_options(
        absolute_urls, data_urls, externals, report_unresolved=report_unresolved
    )
    loader_context = build_loader_context(css_path, root_context)

    source = css_path.read_text(encoding="utf-8")
    result = asyncio.run(ImportParser(options).process_source(source, loader_context))

    if as_json:
        data = result.to_dict()
        if not emit_css:
            data.pop("css", None)
        click.echo(json.dumps(data, indent=2))
    else:
        _echo_text(result)
        if emit_css:
            click.echo()
            click.echo(result.css or "")

    if result.errors:
        sys.exit(1)
