"""Font descriptions and Fontconfig query patterns."""

from __future__ import annotations

from dataclasses import dataclass

# Pango stores sizes in 1/1024ths of a point (or pixel).
PANGO_SCALE = 1024

POINTS_PER_INCH = 72.0


@dataclass(frozen=True)
class FontDescription:
    """The parts of a Pango font description the font-match query needs."""

    text: str
    family: str | None = None
    size: int = 0
    size_is_absolute: bool = False

    @property
    def has_size(self) -> bool:
        return self.size > 0

    @property
    def point_size(self) -> int:
        return self.size // PANGO_SCALE

    @property
    def pixel_size(self) -> float:
        return self.size / PANGO_SCALE


def points_to_pixels(points: float, dpi: float) -> float:
    return points * (dpi / POINTS_PER_INCH)


def _escape(value: str) -> str:
    # Characters with meaning in Fontconfig's pattern name syntax.
    for ch in ("\\", "-", ":", ",", "="):
        value = value.replace(ch, "\\" + ch)
    return value


@dataclass
class FontPattern:
    """A partial Fontconfig pattern, serialized in fc-match name syntax."""

    family: str | None = None
    weight: str | None = None
    slant: str | None = None
    size: int | None = None
    pixel_size: float | None = None
    dpi: float | None = None

    def to_fc_name(self) -> str:
        parts = [_escape(self.family) if self.family else ""]
        if self.weight:
            parts.append(f"weight={self.weight}")
        if self.slant:
            parts.append(f"slant={self.slant}")
        if self.size is not None:
            parts.append(f"size={self.size}")
        if self.pixel_size is not None:
            parts.append(f"pixelsize={self.pixel_size:g}")
        if self.dpi is not None:
            parts.append(f"dpi={self.dpi:g}")
        name = ":".join(parts)
        return name if name else ":"
