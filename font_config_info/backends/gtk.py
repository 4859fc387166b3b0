"""GTK, Pango and GSettings backends built on PyGObject.

PyGObject is imported when a backend is created rather than at module
import, so machines without GTK introspection data can still load the rest
of the package.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from font_config_info.exceptions import BackendUnavailableError
from font_config_info.lookup import Lookup, LookupOutcome, ValueKind, coerce
from font_config_info.pattern import FontDescription

logger = logging.getLogger(__name__)

GTK_VERSION = "3.0"

# Widgets whose default style font is reported, in report order.
STYLE_WIDGETS = ("label", "menu-item", "toolbar")

# GVariant type strings accepted for each value kind.
_VARIANT_KINDS = {
    ValueKind.STRING: ("s",),
    ValueKind.BOOL: ("b",),
    ValueKind.INT: ("y", "n", "q", "i", "u", "x", "t"),
    ValueKind.DOUBLE: ("d",),
}


def load_gi() -> Any:
    """Import the GObject introspection modules the backends use."""
    try:
        import gi

        gi.require_version("Gtk", GTK_VERSION)
        gi.require_version("Gdk", GTK_VERSION)
        gi.require_version("Pango", "1.0")
        from gi.repository import Gdk, Gio, Gtk, Pango
    except (ImportError, ValueError) as e:
        raise BackendUnavailableError("GTK", str(e)) from e
    return _Modules(Gtk=Gtk, Gdk=Gdk, Gio=Gio, Pango=Pango)


@dataclass(frozen=True)
class _Modules:
    Gtk: Any
    Gdk: Any
    Gio: Any
    Pango: Any


def describe_pango(desc: Any) -> FontDescription:
    """Convert a ``Pango.FontDescription`` into a :class:`FontDescription`."""
    return FontDescription(
        text=desc.to_string(),
        family=desc.get_family(),
        size=desc.get_size(),
        size_is_absolute=bool(desc.get_size_is_absolute()),
    )


class GtkSettingsSource:
    """Typed lookups against a ``Gtk.Settings`` object."""

    def __init__(self, settings: Any) -> None:
        self.settings = settings

    def get(self, key: str, kind: ValueKind) -> Lookup:
        try:
            raw = self.settings.get_property(key)
        except TypeError:
            # PyGObject raises TypeError for properties the class lacks.
            return Lookup.missing(LookupOutcome.NO_ID)
        return coerce(raw, kind)


class GSettingsSource:
    """Typed lookups against a ``Gio.Settings`` schema.

    Values are matched on their stored GVariant type, so a double is never
    reported as a string or the other way round.
    """

    def __init__(self, settings: Any, schema: Any) -> None:
        self.settings = settings
        self.schema = schema

    def get(self, key: str, kind: ValueKind) -> Lookup:
        # g_settings_get_value aborts on keys the schema does not define.
        if not self.schema.has_key(key):
            return Lookup.missing(LookupOutcome.NO_ID)

        variant = self.settings.get_value(key)
        if variant is None:
            return Lookup.missing()

        if variant.get_type_string() not in _VARIANT_KINDS[kind]:
            return Lookup.missing(LookupOutcome.TYPE_MISMATCH)
        return Lookup.found(variant.unpack())


class GtkToolkit:
    """Process-wide GTK defaults: settings, widget styles, font parsing."""

    def __init__(self) -> None:
        self.gi = load_gi()
        Gtk = self.gi.Gtk

        initialized, _ = Gtk.init_check(sys.argv[:1])
        if not initialized:
            raise BackendUnavailableError("GTK", "cannot open display")

        self._settings = Gtk.Settings.get_default()
        if self._settings is None:
            raise BackendUnavailableError("GTK", "no default settings object")

    def settings(self) -> GtkSettingsSource:
        return GtkSettingsSource(self._settings)

    def _new_widget(self, kind: str) -> Any:
        Gtk = self.gi.Gtk
        if kind == "label":
            return Gtk.Label(label="foo")
        if kind == "menu-item":
            return Gtk.MenuItem.new_with_label("foo")
        if kind == "toolbar":
            return Gtk.Toolbar()
        raise ValueError(f"Unknown widget kind: {kind}")

    @contextmanager
    def widget(self, kind: str) -> Iterator[GtkWidget]:
        """Create a throwaway widget, destroyed when the block exits."""
        widget = self._new_widget(kind)
        try:
            yield GtkWidget(widget, self.gi.Gtk)
        finally:
            widget.destroy()

    def widget_kinds(self) -> tuple[str, ...]:
        return STYLE_WIDGETS

    def default_font_description(self) -> FontDescription:
        with self.widget("label") as label:
            desc = label.font_description()
        return desc or self.parse_font_description("")

    def parse_font_description(self, text: str) -> FontDescription:
        return describe_pango(self.gi.Pango.FontDescription.from_string(text))

    def resolution(self) -> float | None:
        """Rendering resolution in DPI, or None when it is not set."""
        screen = self.gi.Gdk.Screen.get_default()
        if screen is None:
            return None
        dpi = screen.get_resolution()
        return dpi if dpi > 0 else None

    def desktop_settings(self, schema_id: str) -> GSettingsSource | None:
        """Open a GSettings schema, or None if it is not installed."""
        Gio = self.gi.Gio
        source = Gio.SettingsSchemaSource.get_default()
        schema = source.lookup(schema_id, True) if source is not None else None
        if schema is None:
            logger.warning("GSettings schema %s is not installed", schema_id)
            return None
        return GSettingsSource(Gio.Settings.new(schema_id), schema)


class GtkWidget:
    """Read-only view of a widget's resolved style."""

    def __init__(self, widget: Any, gtk: Any) -> None:
        self.widget = widget
        self._gtk = gtk

    @property
    def type_name(self) -> str:
        return self.widget.__gtype__.name

    def font_description(self) -> FontDescription | None:
        context = self.widget.get_style_context()
        desc = context.get_property("font", self._gtk.StateFlags.NORMAL)
        if desc is None:
            return None
        return describe_pango(desc)
