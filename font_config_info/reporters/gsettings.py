"""GSettings desktop settings reporter."""

from __future__ import annotations

from font_config_info.context import ReportContext
from font_config_info.formatting import FAILED, UNKNOWN_TYPE, UNSET, Section, quoted
from font_config_info.lookup import LookupOutcome, PropertySource, ValueKind


def format_setting(source: PropertySource, key: str) -> str:
    """Render a setting by its stored type."""
    lookup = source.get(key, ValueKind.STRING)
    if lookup.ok:
        return quoted(lookup.value)
    if lookup.outcome in (LookupOutcome.NO_MATCH, LookupOutcome.NO_ID):
        return UNSET

    lookup = source.get(key, ValueKind.DOUBLE)
    if lookup.ok:
        return f"{lookup.value:.2f}"
    return UNKNOWN_TYPE


def report_gsettings(ctx: ReportContext) -> Section:
    schema = ctx.config.schema
    section = Section(f"GSettings ({schema})")

    source = ctx.desktop_settings(schema)
    if source is None:
        section.add_raw(FAILED)
        return section

    for key in ctx.config.gsettings_keys:
        section.add(key, format_setting(source, key))
    return section
