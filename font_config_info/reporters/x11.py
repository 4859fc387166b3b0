"""X11 display geometry and resource database reporters."""

from __future__ import annotations

from font_config_info.backends.x11 import ResourceDatabase
from font_config_info.context import ReportContext
from font_config_info.formatting import FAILED, UNSET, Section, quoted

# Xlib copies resource values into a fixed 256-byte buffer.
RESOURCE_BUFFER_SIZE = 256


def truncate_resource(value: str) -> str:
    """Keep the bytes that fit in the buffer, leaving room for the terminator."""
    data = value.encode("utf-8", errors="surrogateescape")
    return data[: RESOURCE_BUFFER_SIZE - 1].decode("utf-8", errors="replace")


def _format_dpi(dpi: float | None) -> str:
    return f"{dpi:.2f}" if dpi is not None else "n/a"


def report_display(ctx: ReportContext) -> Section:
    """Report screen size in pixels and millimeters, and the derived DPI."""
    section = Section("X11 display info")
    geometry = ctx.display.screen_geometry()

    section.add("screen pixels", f"{geometry.width_px}x{geometry.height_px}")
    section.add(
        "screen size",
        f"{geometry.width_mm}x{geometry.height_mm} mm "
        f"({_format_dpi(geometry.x_dpi)}x{_format_dpi(geometry.y_dpi)} DPI)",
    )
    return section


def report_resources(ctx: ReportContext) -> Section:
    """Report the Xft entries of the RESOURCE_MANAGER database."""
    section = Section("X resources (xrdb)")

    data = ctx.display.resource_manager_string()
    if data is None:
        section.add_raw(FAILED)
        return section

    db = ResourceDatabase(data)
    for name in ctx.config.xresources:
        value = db.lookup(name)
        section.add(name, UNSET if value is None else quoted(truncate_resource(value)))
    return section
