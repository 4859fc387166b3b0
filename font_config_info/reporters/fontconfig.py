"""Fontconfig font-match reporter."""

from __future__ import annotations

from dataclasses import dataclass

from font_config_info.context import ReportContext
from font_config_info.formatting import (
    Section,
    hint_style_name,
    lookup_or_placeholder,
    rgba_name,
)
from font_config_info.lookup import ValueKind
from font_config_info.pattern import FontDescription, FontPattern, points_to_pixels


@dataclass(frozen=True)
class FontRequest:
    """What the user asked Fontconfig for."""

    description: str | None = None
    bold: bool = False
    italic: bool = False


# Resolved properties, in report order.
MATCH_FIELDS = (
    ("family", ValueKind.STRING, str),
    ("pixelsize", ValueKind.DOUBLE, lambda v: f"{v:.2f} pixels"),
    ("size", ValueKind.INT, lambda v: f"{v} points"),
    ("antialias", ValueKind.BOOL, str),
    ("hinting", ValueKind.BOOL, str),
    ("autohint", ValueKind.BOOL, str),
    ("hintstyle", ValueKind.INT, lambda v: f"{v} ({hint_style_name(v)})"),
    ("rgba", ValueKind.INT, lambda v: f"{v} ({rgba_name(v)})"),
)


def resolve_description(ctx: ReportContext, request: FontRequest) -> FontDescription:
    if request.description is not None:
        return ctx.toolkit.parse_font_description(request.description)
    return ctx.toolkit.default_font_description()


def build_pattern(
    ctx: ReportContext, desc: FontDescription, request: FontRequest, section: Section
) -> FontPattern:
    """Build the query pattern, noting each requested constraint in ``section``."""
    pattern = FontPattern(family=desc.family)

    if request.bold:
        pattern.weight = "bold"
        section.add("requested weight", "FC_WEIGHT_BOLD")
    if request.italic:
        pattern.slant = "italic"
        section.add("requested slant", "FC_SLANT_ITALIC")

    if not desc.has_size:
        return pattern

    if desc.size_is_absolute:
        pattern.pixel_size = desc.pixel_size
        section.add("requested size", f"{desc.pixel_size:.2f} pixels")
    else:
        dpi = ctx.toolkit.resolution() or ctx.config.fallback_dpi
        pattern.size = desc.point_size
        pattern.dpi = dpi
        pixels = points_to_pixels(desc.point_size, dpi)
        section.add(
            "requested size",
            f"{desc.point_size} points ({pixels:.2f} pixels at {dpi:.2f} DPI)",
        )
    return pattern


def report_fontconfig(ctx: ReportContext, request: FontRequest) -> Section:
    """Report what Fontconfig resolves the requested font to."""
    desc = resolve_description(ctx, request)
    section = Section(f"Fontconfig ({desc.text})")

    pattern = build_pattern(ctx, desc, request, section)
    match = ctx.fontconfig.match(pattern)

    for name, kind, render in MATCH_FIELDS:
        section.add(name, lookup_or_placeholder(match.get(name, kind), render))
    return section
