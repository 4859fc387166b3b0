"""Typed property lookup shared by every settings backend.

GTK settings, GSettings and Fontconfig resolved patterns all answer the same
question: "what is the value of this key, as this type?". Each backend
implements :class:`PropertySource` and returns a :class:`Lookup` so reporters
can treat them uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class ValueKind(Enum):
    """Value type a reporter expects for a key."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"


class LookupOutcome(Enum):
    """Result of a lookup, named after Fontconfig's FcResult codes."""

    MATCH = "match"
    NO_MATCH = "no match"
    TYPE_MISMATCH = "type mismatch"
    NO_ID = "no id"
    OUT_OF_MEMORY = "out of memory"
    UNKNOWN = "unknown"

    @property
    def placeholder(self) -> str:
        """Bracketed form printed in place of a value."""
        return f"[{self.value}]"


@dataclass(frozen=True)
class Lookup:
    """A value, or the reason there is none."""

    value: Any = None
    outcome: LookupOutcome = LookupOutcome.MATCH

    @property
    def ok(self) -> bool:
        return self.outcome is LookupOutcome.MATCH

    @classmethod
    def found(cls, value: Any) -> Lookup:
        return cls(value=value)

    @classmethod
    def missing(cls, outcome: LookupOutcome = LookupOutcome.NO_MATCH) -> Lookup:
        return cls(outcome=outcome)


class PropertySource(Protocol):
    """Anything that can answer typed key lookups."""

    def get(self, key: str, kind: ValueKind) -> Lookup: ...


# Fontconfig prints FcBool values with these names.
_FC_BOOL_NAMES = {"true": 1, "false": 0, "dontcare": 2}


def coerce(raw: Any, kind: ValueKind) -> Lookup:
    """Convert a raw backend value to ``kind``.

    ``None`` is a miss. Anything that cannot be represented as ``kind`` is a
    type mismatch, never an exception.
    """
    if raw is None:
        return Lookup.missing()

    if kind is ValueKind.STRING:
        if isinstance(raw, str):
            return Lookup.found(raw)
        return Lookup.missing(LookupOutcome.TYPE_MISMATCH)

    if kind is ValueKind.BOOL:
        if isinstance(raw, bool):
            return Lookup.found(int(raw))
        if isinstance(raw, int):
            return Lookup.found(raw)
        if isinstance(raw, str) and raw.strip().lower() in _FC_BOOL_NAMES:
            return Lookup.found(_FC_BOOL_NAMES[raw.strip().lower()])
        return Lookup.missing(LookupOutcome.TYPE_MISMATCH)

    if kind is ValueKind.INT:
        if isinstance(raw, bool):
            return Lookup.missing(LookupOutcome.TYPE_MISMATCH)
        if isinstance(raw, int):
            return Lookup.found(raw)
        if isinstance(raw, float):
            # FcPatternGetInteger truncates doubles.
            return Lookup.found(int(raw))
        if isinstance(raw, str):
            return _parse_number(raw, int)
        return Lookup.missing(LookupOutcome.TYPE_MISMATCH)

    if kind is ValueKind.DOUBLE:
        if isinstance(raw, bool):
            return Lookup.missing(LookupOutcome.TYPE_MISMATCH)
        if isinstance(raw, (int, float)):
            return Lookup.found(float(raw))
        if isinstance(raw, str):
            return _parse_number(raw, float)
        return Lookup.missing(LookupOutcome.TYPE_MISMATCH)

    return Lookup.missing(LookupOutcome.UNKNOWN)


def _parse_number(text: str, target: type) -> Lookup:
    text = text.strip()
    if not text:
        return Lookup.missing()
    try:
        value = float(text)
    except ValueError:
        return Lookup.missing(LookupOutcome.TYPE_MISMATCH)
    return Lookup.found(int(value) if target is int else value)
