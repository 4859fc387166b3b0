"""Reporters: one titled section per queried subsystem.

Each reporter takes a :class:`~font_config_info.context.ReportContext` and
returns a :class:`~font_config_info.formatting.Section`; none of them print.
"""

from font_config_info.reporters.fontconfig import FontRequest, report_fontconfig
from font_config_info.reporters.gsettings import report_gsettings
from font_config_info.reporters.gtk import report_gtk_settings, report_gtk_styles
from font_config_info.reporters.x11 import report_display, report_resources
from font_config_info.reporters.xsettings import report_xsettings

__all__ = [
    "FontRequest",
    "report_fontconfig",
    "report_gsettings",
    "report_gtk_settings",
    "report_gtk_styles",
    "report_display",
    "report_resources",
    "report_xsettings",
]
