"""Exception hierarchy for font-config-info.

Only conditions that stop the report raise. A missing setting, resource or
matched property is rendered as a placeholder instead.
"""

from __future__ import annotations

from typing import Any


class FontConfigInfoError(Exception):
    """Base class for all font-config-info errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v}" for k, v in sorted(self.details.items()))
        return f"{self.message} ({extra})"


class ConfigError(FontConfigInfoError):
    """Raised when the configuration file is unreadable or invalid."""


class BackendUnavailableError(FontConfigInfoError):
    """Raised when a core handle (display, toolkit, Fontconfig) cannot be opened."""

    def __init__(
        self, backend: str, reason: str, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(f"{backend} unavailable: {reason}", details)
        self.backend = backend
        self.reason = reason


class HelperUnavailableError(FontConfigInfoError):
    """Raised when the external XSETTINGS helper is missing or fails."""

    def __init__(
        self,
        command: str,
        returncode: int | None = None,
        details: dict[str, Any] | None = None,
        reason: str | None = None,
    ) -> None:
        if reason is not None:
            message = f"{command} {reason}"
        elif returncode is None:
            message = f"{command} not found"
        else:
            message = f"{command} exited with status {returncode}"
        super().__init__(message, details)
        self.command = command
        self.returncode = returncode
