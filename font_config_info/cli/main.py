"""font-config-info command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from font_config_info.config import Config
from font_config_info.context import ReportContext
from font_config_info.exceptions import FontConfigInfoError
from font_config_info.report import ReportOptions, build_report, render_report
from font_config_info.reporters import FontRequest

err_console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


class ReportCommand(click.Command):
    """Command whose usage errors exit with status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(
    cls=ReportCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-b", "--bold", is_flag=True, help="Request bold font from Fontconfig")
@click.option(
    "-f",
    "--font",
    "font_desc",
    metavar="DESC",
    help="Specify Pango font description for Fontconfig",
)
@click.option("-i", "--italic", is_flag=True, help="Request italic font from Fontconfig")
@click.option("--no-styles", is_flag=True, help="Skip the GTK widget styles section")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (TOML)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
def cli(
    bold: bool,
    font_desc: str | None,
    italic: bool,
    no_styles: bool,
    config_path: Path | None,
    log_level: str,
) -> None:
    """Print the font rendering configuration of the current desktop.

    Reports GTK settings, GSettings, X11 display geometry and resources,
    XSETTINGS and the font Fontconfig resolves for the requested description.
    """
    setup_logging(log_level.upper())

    options = ReportOptions(
        font=FontRequest(description=font_desc, bold=bold, italic=italic),
        styles=not no_styles,
    )

    try:
        config = Config.load(config_path)
        with ReportContext.system(config) as report_ctx:
            sections = build_report(report_ctx, options)
    except FontConfigInfoError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1) from e

    for line in render_report(sections):
        click.echo(line)


def main() -> None:
    cli(prog_name="font-config-info")


if __name__ == "__main__":
    main()
