"""The context object every reporter receives."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from typing import Protocol

from font_config_info.backends.x11 import ScreenGeometry
from font_config_info.config import Config
from font_config_info.lookup import PropertySource
from font_config_info.pattern import FontDescription, FontPattern


class StyledWidget(Protocol):
    type_name: str

    def font_description(self) -> FontDescription | None: ...


class Toolkit(Protocol):
    def settings(self) -> PropertySource: ...

    def widget_kinds(self) -> tuple[str, ...]: ...

    def widget(self, kind: str) -> AbstractContextManager[StyledWidget]: ...

    def default_font_description(self) -> FontDescription: ...

    def parse_font_description(self, text: str) -> FontDescription: ...

    def resolution(self) -> float | None: ...


class Display(Protocol):
    def screen_geometry(self) -> ScreenGeometry: ...

    def resource_manager_string(self) -> str | None: ...

    def close(self) -> None: ...


class XSettings(Protocol):
    def run(self) -> list[tuple[str, str]]: ...


class FontMatcher(Protocol):
    def match(self, pattern: FontPattern) -> PropertySource: ...


@dataclass
class ReportContext:
    """Handles to every queried subsystem, closed together."""

    toolkit: Toolkit
    desktop_settings: Callable[[str], PropertySource | None]
    display: Display
    xsettings: XSettings
    fontconfig: FontMatcher
    config: Config = field(default_factory=Config)

    @classmethod
    def system(cls, config: Config) -> ReportContext:
        """Open the live desktop backends.

        Raises:
            BackendUnavailableError: If the display, GTK or their defaults
                cannot be opened.
        """
        from font_config_info.backends.fontconfig import FcMatcher
        from font_config_info.backends.gtk import GtkToolkit
        from font_config_info.backends.x11 import XDisplay
        from font_config_info.backends.xsettings import XSettingsHelper

        toolkit = GtkToolkit()
        display = XDisplay()
        return cls(
            toolkit=toolkit,
            desktop_settings=toolkit.desktop_settings,
            display=display,
            xsettings=XSettingsHelper(config.helper_command, config.helper_timeout),
            fontconfig=FcMatcher(config.fc_match_command),
            config=config,
        )

    def close(self) -> None:
        self.display.close()

    def __enter__(self) -> ReportContext:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
