"""Dedup and emission: turns resolution slots into ordered output records."""

from __future__ import annotations

from typing import Callable, Sequence

from atimport.model.at_rule import ResolvedAtRule
from atimport.model.records import ApiRecord, ImportRecord

IMPORT_NAME_TEMPLATE = "___CSS_LOADER_AT_RULE_IMPORT_{}___"


def emit_records(
    resolved_at_rules: Sequence[ResolvedAtRule | None],
    url_handler: Callable[[str], str] | None = None,
) -> tuple[list[ImportRecord], list[ApiRecord]]:
    """Build the ``imports`` and ``api`` lists from resolution slots.

    Slots are read in order and ``None`` slots are skipped. Requestable
    imports sharing a ``prefix!url`` key share one dependency, but each
    occurrence still gets its own apply record since its layer, supports and
    media conditions are its own.
    """
    imports: list[ImportRecord] = []
    api: list[ApiRecord] = []
    names: dict[str, str] = {}

    for index, resolved in enumerate(resolved_at_rules):
        if resolved is None:
            continue

        if not resolved.requestable:
            api.append(
                ApiRecord(
                    index=index,
                    url=resolved.url,
                    layer=resolved.layer,
                    supports=resolved.supports,
                    media=resolved.media,
                )
            )
            continue

        request = resolved.request
        import_name = names.get(request)
        if import_name is None:
            import_name = IMPORT_NAME_TEMPLATE.format(len(names))
            names[request] = import_name
            imports.append(
                ImportRecord(
                    import_name=import_name,
                    url=url_handler(request) if url_handler else request,
                    index=index,
                )
            )

        api.append(
            ApiRecord(
                index=index,
                import_name=import_name,
                layer=resolved.layer,
                supports=resolved.supports,
                media=resolved.media,
            )
        )

    return imports, api
