"""font-config-info: report font rendering configuration on a Linux desktop.

The report covers:
- GTK settings and default widget styles
- GSettings (org.gnome.desktop.interface)
- X11 screen geometry and the RESOURCE_MANAGER database
- XSETTINGS, via dump_xsettings
- the font Fontconfig resolves for a requested description

Example:
    >>> from font_config_info import Config, ReportContext, ReportOptions
    >>> from font_config_info import build_report, render_report
    >>> with ReportContext.system(Config.load()) as ctx:
    ...     print("\\n".join(render_report(build_report(ctx, ReportOptions()))))
"""

from font_config_info.config import Config
from font_config_info.context import ReportContext
from font_config_info.exceptions import (
    BackendUnavailableError,
    ConfigError,
    FontConfigInfoError,
    HelperUnavailableError,
)
from font_config_info.report import ReportOptions, build_report, render_report

__version__ = "0.3.0"

__all__ = [
    # Main API
    "ReportContext",
    "ReportOptions",
    "build_report",
    "render_report",
    "Config",
    # Exceptions
    "FontConfigInfoError",
    "ConfigError",
    "BackendUnavailableError",
    "HelperUnavailableError",
    # Metadata
    "__version__",
]
