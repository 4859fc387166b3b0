"""Column layout and value formatters for the text report."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from font_config_info.lookup import Lookup

NAME_WIDTH = 20

UNSET = "[unset]"
FAILED = "[failed]"
UNKNOWN_TYPE = "[unknown type]"

HINT_STYLE_NAMES = {
    0: "none",
    1: "slight",
    2: "medium",
    3: "full",
}

RGBA_NAMES = {
    0: "unknown",
    1: "rgb",
    2: "bgr",
    3: "vrgb",
    4: "vbgr",
    5: "none",
}


def property_line(name: str, value: object) -> str:
    """Return ``name`` padded to the name column, one space, then ``value``."""
    return f"{name:<{NAME_WIDTH}} {value}"


def quoted(value: str | None) -> str:
    return f'"{value}"' if value is not None else UNSET


def tristate(value: int) -> str:
    """GTK boolean-ish integer: negative means "use the default"."""
    if value == 0:
        label = "no"
    elif value > 0:
        label = "yes"
    else:
        label = "default"
    return f"{value} ({label})"


def gtk_dpi(value: int) -> str:
    """``gtk-xft-dpi`` holds the real DPI times 1024."""
    if value > 0:
        return f"{value} ({value / 1024.0:.2f} DPI)"
    return f"{value} (default)"


def hint_style_name(style: int) -> str:
    return HINT_STYLE_NAMES.get(style, "invalid")


def rgba_name(rgba: int) -> str:
    return RGBA_NAMES.get(rgba, "invalid")


def lookup_or_placeholder(lookup: Lookup, render) -> str:
    """Render a successful lookup, or its bracketed outcome."""
    if lookup.ok:
        return render(lookup.value)
    return lookup.outcome.placeholder


@dataclass
class Section:
    """One titled block of the report."""

    title: str
    lines: list[str] = field(default_factory=list)

    def add(self, name: str, value: object) -> None:
        self.lines.append(property_line(name, value))

    def add_raw(self, line: str) -> None:
        self.lines.append(line)

    def render(self) -> Iterator[str]:
        yield f"{self.title}:"
        yield from self.lines
        yield ""
