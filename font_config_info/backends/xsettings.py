"""XSETTINGS access through the external dump_xsettings helper."""

from __future__ import annotations

import logging
import re
import subprocess

from font_config_info.exceptions import HelperUnavailableError

logger = logging.getLogger(__name__)

# Only the font-related settings are reported.
SETTING_FILTER = re.compile(r"^(Gtk/FontName |Xft/)")


def parse_settings(output: str) -> list[tuple[str, str]]:
    """Pick font settings out of dump_xsettings output.

    Each line is ``<key> <value>`` with one or more spaces between them.
    """
    pairs = []
    for line in output.splitlines():
        if not SETTING_FILTER.match(line):
            continue
        key, _, value = line.partition(" ")
        pairs.append((key, value.lstrip(" ")))
    return pairs


class XSettingsHelper:
    """Run ``dump_xsettings`` and return its font settings."""

    def __init__(self, command: str = "dump_xsettings", timeout: float = 10.0) -> None:
        self.command = command
        self.timeout = timeout

    def run(self) -> list[tuple[str, str]]:
        """Return ``(key, value)`` pairs.

        Raises:
            HelperUnavailableError: If the helper is missing, times out or
                exits with a non-zero status.
        """
        logger.debug("Running %s", self.command)
        try:
            result = subprocess.run(
                [self.command],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise HelperUnavailableError(self.command) from e
        except subprocess.TimeoutExpired as e:
            raise HelperUnavailableError(
                self.command, reason=f"timed out after {self.timeout:g} seconds"
            ) from e

        if result.returncode != 0:
            raise HelperUnavailableError(
                self.command,
                returncode=result.returncode,
                details={"stderr": result.stderr.strip()},
            )

        return parse_settings(result.stdout)
