"""XSETTINGS reporter."""

from __future__ import annotations

import logging

from font_config_info.context import ReportContext
from font_config_info.exceptions import HelperUnavailableError
from font_config_info.formatting import Section

logger = logging.getLogger(__name__)


def report_xsettings(ctx: ReportContext) -> Section:
    section = Section("XSETTINGS")
    try:
        settings = ctx.xsettings.run()
    except HelperUnavailableError as e:
        logger.info("XSETTINGS not available: %s", e)
        section.add_raw(
            f"Install {ctx.config.helper_command} from {ctx.config.helper_url}"
        )
        section.add_raw("to print this information.")
        return section

    for key, value in settings:
        section.add(key, value)
    return section
