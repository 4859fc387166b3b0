"""Fontconfig backend built on the fc-match command line tool.

fc-match applies the configuration substitutions, the default substitutions
and the best-match algorithm against the system font catalog, which is the
same resolution sequence an application performs through libfontconfig.
"""

from __future__ import annotations

import logging
import subprocess

from font_config_info.exceptions import BackendUnavailableError
from font_config_info.lookup import Lookup, ValueKind, coerce
from font_config_info.pattern import FontPattern

logger = logging.getLogger(__name__)

# Properties read back from the resolved pattern.
MATCH_PROPERTIES = (
    "family",
    "pixelsize",
    "size",
    "antialias",
    "hinting",
    "autohint",
    "hintstyle",
    "rgba",
)


def _match_format(properties: tuple[str, ...]) -> str:
    # One "name=value" line per property present in the match. Absent
    # properties produce no line at all.
    return "".join(f"%{{?{p}{{{p}=%{{{p}[0]}}\\n}}}}" for p in properties)


class ResolvedPattern:
    """Property values of a matched font."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values

    def get(self, key: str, kind: ValueKind) -> Lookup:
        return coerce(self.values.get(key), kind)

    @classmethod
    def parse(cls, output: str) -> ResolvedPattern:
        values: dict[str, str] = {}
        for line in output.splitlines():
            name, sep, value = line.partition("=")
            if sep and name:
                values[name] = value
        return cls(values)


class FcMatcher:
    """Resolve :class:`FontPattern` queries with fc-match."""

    def __init__(
        self,
        command: str = "fc-match",
        timeout: float = 30.0,
        properties: tuple[str, ...] = MATCH_PROPERTIES,
    ) -> None:
        self.command = command
        self.timeout = timeout
        self.properties = properties

    def match(self, pattern: FontPattern) -> ResolvedPattern:
        name = pattern.to_fc_name()
        cmd = [self.command, f"--format={_match_format(self.properties)}", name]
        logger.debug("Running %s", " ".join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise BackendUnavailableError(
                "Fontconfig", f"{self.command} not found"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise BackendUnavailableError(
                "Fontconfig",
                f"{self.command} timed out after {self.timeout} seconds",
            ) from e

        if result.returncode != 0:
            raise BackendUnavailableError(
                "Fontconfig",
                f"{self.command} failed for pattern {name!r}",
                {"returncode": result.returncode, "stderr": result.stderr.strip()},
            )

        return ResolvedPattern.parse(result.stdout)
