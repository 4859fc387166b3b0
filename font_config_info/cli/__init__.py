"""Command line interface for font-config-info."""

from font_config_info.cli.main import cli

__all__ = ["cli"]
