"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable

import click

from atimport.loader import LoaderContext
from atimport.options import ImportParserOptions
from atimport.resolver import path_resolver_factory


def import_options(func: Callable) -> Callable:
    """Attach the import parser flags to a click command."""
    func = click.option(
        "--external",
        "externals",
        multiple=True,
        help="URL left to the runtime (repeatable; prefix with 're:' for a regex)",
    )(func)
    func = click.option("--data-urls", is_flag=True, help="Bundle data: imports")(func)
    func = click.option("--absolute-urls", is_flag=True, help="Bundle http(s) imports")(func)
    return func


def build_options(
    absolute_urls: bool,
    data_urls: bool,
    externals: tuple[str, ...],
    **extra: object,
) -> ImportParserOptions:
    compiled: list[str | re.Pattern] = []
    for external in externals:
        if external.startswith("re:"):
            try:
                compiled.append(re.compile(external[3:]))
            except re.error as exc:
                raise click.BadParameter(str(exc), param_hint="--external") from exc
        else:
            compiled.append(external)
    return ImportParserOptions(
        is_support_absolute_url=absolute_urls,
        is_support_data_url=data_urls,
        externals=tuple(compiled),
        **extra,  # type: ignore[arg-type]
    )


def build_loader_context(css_path: Path, root_context: str | None = None) -> LoaderContext:
    return LoaderContext(
        resource_path=str(css_path.resolve()),
        get_resolve=path_resolver_factory,
        root_context=root_context,
    )


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
