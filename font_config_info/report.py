"""Run every reporter in order and render the result."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass

from font_config_info.context import ReportContext
from font_config_info.formatting import Section
from font_config_info.reporters import (
    FontRequest,
    report_display,
    report_fontconfig,
    report_gsettings,
    report_gtk_settings,
    report_gtk_styles,
    report_resources,
    report_xsettings,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportOptions:
    font: FontRequest = FontRequest()
    styles: bool = True


def build_report(ctx: ReportContext, options: ReportOptions) -> list[Section]:
    """Query every subsystem. Ordering is purely presentational."""
    steps = [report_gtk_settings]
    if options.styles:
        steps.append(report_gtk_styles)
    steps += [report_gsettings, report_display, report_resources, report_xsettings]

    sections = []
    for step in steps:
        logger.debug("Running %s", step.__name__)
        sections.append(step(ctx))

    logger.debug("Running report_fontconfig")
    sections.append(report_fontconfig(ctx, options.font))
    return sections


def render_report(sections: list[Section], now: float | None = None) -> Iterator[str]:
    yield f"Running at {time.ctime(now)}"
    yield ""
    for section in sections:
        yield from section.render()
