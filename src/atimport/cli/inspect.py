"""CLI command: atimport inspect -- list classified @import rules."""

from __future__ import annotations

from pathlib import Path

import click

from atimport.cli.common import build_options, import_options
from atimport.model.result import Err
from atimport.parser import classify_at_rule
from atimport.stylesheet import parse_stylesheet
from atimport.transforms import apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@import_options
def inspect(cssfile: str, absolute_urls: bool, data_urls: bool, externals: tuple[str, ...]) -> None:
    """Classify the @import rules of a stylesheet without resolving them.

    Shows url, loader prefix, layer/supports/media and whether each import
    would become a bundler request.
    """
    css_path = Path(cssfile)
    options = build_options(absolute_urls, data_urls, externals)

    root = apply_transforms(parse_stylesheet(css_path.read_text(encoding="utf-8")))
    at_rules = root.walk_at_rules("import")

    click.echo(f"Stylesheet: {css_path.name}")
    click.echo(f"@import rules: {len(at_rules)}")
    click.echo()

    for at_rule in at_rules:
        outcome = classify_at_rule(
            at_rule,
            is_support_absolute_url=options.is_support_absolute_url,
            is_support_data_url=options.is_support_data_url,
            externals=options.externals,
        )
        location = f"  {at_rule.line}:{at_rule.column}"
        if outcome is None:
            click.echo(f"{location}  skipped")
            continue
        if isinstance(outcome, Err):
            click.echo(f"{location}  invalid ({outcome.kind.value})")
            continue

        parsed = outcome.value
        parts = [location, f'url="{parsed.url}"']
        if parsed.prefix:
            parts.append(f'prefix="{parsed.prefix}"')
        if parsed.layer is not None:
            parts.append(f'layer="{parsed.layer}"')
        if parsed.supports is not None:
            parts.append(f'supports="{parsed.supports}"')
        if parsed.media is not None:
            parts.append(f'media="{parsed.media}"')
        parts.append(f"requestable={str(parsed.requestable).lower()}")
        parts.append(f"resolve={str(parsed.need_resolve).lower()}")
        click.echo("  ".join(parts))
