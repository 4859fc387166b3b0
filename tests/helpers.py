"""Fake backends standing in for GTK, X11, XSETTINGS and Fontconfig."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from font_config_info.backends.fontconfig import ResolvedPattern
from font_config_info.backends.x11 import ScreenGeometry
from font_config_info.config import Config
from font_config_info.context import ReportContext
from font_config_info.exceptions import HelperUnavailableError
from font_config_info.lookup import Lookup, LookupOutcome, ValueKind
from font_config_info.pattern import PANGO_SCALE, FontDescription, FontPattern

_KIND_TYPES = {
    ValueKind.STRING: str,
    ValueKind.BOOL: bool,
    ValueKind.INT: int,
    ValueKind.DOUBLE: float,
}


class FakeSource:
    """Strictly typed property source backed by a dict."""

    def __init__(self, values: dict[str, Any]) -> None:
        self.values = values

    def get(self, key: str, kind: ValueKind) -> Lookup:
        if key not in self.values:
            return Lookup.missing()
        value = self.values[key]
        expected = _KIND_TYPES[kind]
        if type(value) is not expected:
            return Lookup.missing(LookupOutcome.TYPE_MISMATCH)
        return Lookup.found(value)


class FakeWidget:
    def __init__(self, type_name: str, desc: FontDescription | None) -> None:
        self.type_name = type_name
        self._desc = desc

    def font_description(self) -> FontDescription | None:
        return self._desc


def parse_description(text: str) -> FontDescription:
    """Tiny stand-in for Pango's description parser: "Family [N|Npx]"."""
    family, _, last = text.rpartition(" ")
    absolute = last.endswith("px")
    number = last[:-2] if absolute else last
    try:
        size = round(float(number) * PANGO_SCALE)
    except ValueError:
        return FontDescription(text=text, family=text or None)
    return FontDescription(
        text=text, family=family or None, size=size, size_is_absolute=absolute
    )


class FakeToolkit:
    def __init__(
        self,
        settings: dict[str, Any] | None = None,
        widgets: dict[str, tuple[str, FontDescription | None]] | None = None,
        resolution: float | None = 96.0,
    ) -> None:
        self._settings = FakeSource(settings or {})
        self._widgets = widgets or {}
        self._resolution = resolution
        self.created: list[str] = []
        self.destroyed: list[str] = []

    def settings(self) -> FakeSource:
        return self._settings

    def widget_kinds(self) -> tuple[str, ...]:
        return tuple(self._widgets)

    @contextmanager
    def widget(self, kind: str) -> Iterator[FakeWidget]:
        type_name, desc = self._widgets[kind]
        self.created.append(kind)
        try:
            yield FakeWidget(type_name, desc)
        finally:
            self.destroyed.append(kind)

    def default_font_description(self) -> FontDescription:
        _, desc = self._widgets.get("label", ("GtkLabel", None))
        return desc or parse_description("")

    def parse_font_description(self, text: str) -> FontDescription:
        return parse_description(text)

    def resolution(self) -> float | None:
        return self._resolution


class FakeDisplay:
    def __init__(
        self,
        geometry: ScreenGeometry | None = None,
        resources: str | None = None,
    ) -> None:
        self.geometry = geometry or ScreenGeometry(1920, 1080, 480, 270)
        self.resources = resources
        self.closed = False

    def screen_geometry(self) -> ScreenGeometry:
        return self.geometry

    def resource_manager_string(self) -> str | None:
        return self.resources

    def close(self) -> None:
        self.closed = True


class FakeXSettings:
    def __init__(
        self, pairs: list[tuple[str, str]] | None = None, available: bool = True
    ) -> None:
        self.pairs = pairs or []
        self.available = available

    def run(self) -> list[tuple[str, str]]:
        if not self.available:
            raise HelperUnavailableError("dump_xsettings")
        return self.pairs


class FakeMatcher:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = values if values is not None else dict(DEFAULT_MATCH)
        self.patterns: list[FontPattern] = []

    def match(self, pattern: FontPattern) -> ResolvedPattern:
        self.patterns.append(pattern)
        return ResolvedPattern(self.values)


DEFAULT_MATCH = {
    "family": "DejaVu Sans",
    "pixelsize": "13.3333",
    "size": "10",
    "antialias": "True",
    "hinting": "True",
    "autohint": "False",
    "hintstyle": "1",
    "rgba": "1",
}

DEFAULT_GTK_SETTINGS = {
    "gtk-font-name": "Cantarell 11",
    "gtk-xft-antialias": 1,
    "gtk-xft-hinting": -1,
    "gtk-xft-hintstyle": "hintslight",
    "gtk-xft-rgba": "rgb",
    "gtk-xft-dpi": 98304,
}

SANS_10 = FontDescription(text="Sans 10", family="Sans", size=10 * PANGO_SCALE)

DEFAULT_WIDGETS = {
    "label": ("GtkLabel", SANS_10),
    "menu-item": ("GtkMenuItem", SANS_10),
    "toolbar": ("GtkToolbar", None),
}

RESOURCES = "Xft.antialias:\t1\nXft.hintstyle:\thintfull\nXft.dpi:\t96\n"


def make_context(**overrides: Any) -> ReportContext:
    """Build a ReportContext from fakes, replacing any of its parts."""
    gsettings = overrides.pop(
        "gsettings", {"font-name": "Cantarell 11", "text-scaling-factor": 1.25}
    )
    parts: dict[str, Any] = {
        "toolkit": FakeToolkit(DEFAULT_GTK_SETTINGS, DEFAULT_WIDGETS),
        "desktop_settings": lambda schema: (
            FakeSource(gsettings) if gsettings is not None else None
        ),
        "display": FakeDisplay(resources=RESOURCES),
        "xsettings": FakeXSettings([("Xft/DPI", "98304"), ("Xft/RGBA", "rgb")]),
        "fontconfig": FakeMatcher(),
        "config": Config(),
    }
    parts.update(overrides)
    return ReportContext(**parts)


