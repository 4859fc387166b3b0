"""GTK settings and default widget style reporters."""

from __future__ import annotations

from font_config_info.context import ReportContext
from font_config_info.formatting import Section, gtk_dpi, quoted, tristate
from font_config_info.lookup import Lookup, ValueKind

# Booleans stored as ints where a negative value means "use the default".
_UNSET_INT = -1


def _string(lookup: Lookup) -> str:
    return quoted(lookup.value if lookup.ok else None)


def _tristate(lookup: Lookup) -> str:
    return tristate(lookup.value if lookup.ok else _UNSET_INT)


def _dpi(lookup: Lookup) -> str:
    return gtk_dpi(lookup.value if lookup.ok else _UNSET_INT)


SETTINGS = (
    ("gtk-font-name", ValueKind.STRING, _string),
    ("gtk-xft-antialias", ValueKind.INT, _tristate),
    ("gtk-xft-hinting", ValueKind.INT, _tristate),
    ("gtk-xft-hintstyle", ValueKind.STRING, _string),
    ("gtk-xft-rgba", ValueKind.STRING, _string),
    ("gtk-xft-dpi", ValueKind.INT, _dpi),
)


def report_gtk_settings(ctx: ReportContext) -> Section:
    """Report the toolkit's default settings object."""
    section = Section("GtkSettings")
    settings = ctx.toolkit.settings()
    for key, kind, render in SETTINGS:
        section.add(key, render(settings.get(key, kind)))
    return section


def report_gtk_styles(ctx: ReportContext) -> Section:
    """Report the font each default widget style resolves to."""
    section = Section("GTK styles")
    for kind in ctx.toolkit.widget_kinds():
        with ctx.toolkit.widget(kind) as widget:
            desc = widget.font_description()
            section.add(widget.type_name, quoted(desc.text if desc else None))
    return section
