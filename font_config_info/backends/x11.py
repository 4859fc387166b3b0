"""X11 display backend built on python-xlib."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from Xlib import Xatom, rdb
from Xlib import display as xdisplay
from Xlib.error import DisplayError

from font_config_info.exceptions import BackendUnavailableError

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


@dataclass(frozen=True)
class ScreenGeometry:
    """Pixel and physical size of the default screen."""

    width_px: int
    height_px: int
    width_mm: int
    height_mm: int

    @property
    def x_dpi(self) -> float | None:
        return _dpi(self.width_px, self.width_mm)

    @property
    def y_dpi(self) -> float | None:
        return _dpi(self.height_px, self.height_mm)


def _dpi(pixels: int, millimeters: int) -> float | None:
    # Headless and virtual displays may report a zero physical size.
    if millimeters <= 0:
        return None
    return pixels * MM_PER_INCH / millimeters


def decode_resources(data: bytes) -> str:
    """Decode RESOURCE_MANAGER bytes.

    xrdb stores UTF-8. Bytes that are not valid UTF-8 are kept as surrogate
    escapes so the raw value can be recovered byte for byte.
    """
    return data.decode("utf-8", errors="surrogateescape")


class ResourceDatabase:
    """A parsed X resource database."""

    def __init__(self, data: str) -> None:
        self._db = rdb.ResourceDB(string=data)

    def lookup(self, name: str) -> str | None:
        # python-xlib wants a class with as many components as the name.
        # Querying with the name as its own class matches every entry the
        # name matches.
        try:
            return self._db.get(name, name)
        except ValueError:
            return None


class XDisplay:
    """Connection to the X server named by ``$DISPLAY``."""

    def __init__(self, name: str | None = None) -> None:
        try:
            self._display = xdisplay.Display(name)
        except DisplayError as e:
            raise BackendUnavailableError("X11 display", str(e)) from e
        logger.debug("Opened X display %s", self._display.get_display_name())

    def screen_geometry(self) -> ScreenGeometry:
        screen = self._display.screen()
        return ScreenGeometry(
            width_px=screen.width_in_pixels,
            height_px=screen.height_in_pixels,
            width_mm=screen.width_in_mms,
            height_mm=screen.height_in_mms,
        )

    def resource_manager_string(self) -> str | None:
        """Return the RESOURCE_MANAGER property of the first root window."""
        root = self._display.screen(0).root
        prop = root.get_full_property(Xatom.RESOURCE_MANAGER, Xatom.STRING)
        if prop is None:
            return None
        value = prop.value
        if isinstance(value, bytes):
            return decode_resources(value)
        return str(value)

    def close(self) -> None:
        self._display.close()
