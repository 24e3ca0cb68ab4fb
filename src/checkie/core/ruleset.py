"""Rule-variant configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

_TRUE_STRINGS = ("true", "1", "yes")
_FALSE_STRINGS = ("false", "0", "no")


def _to_bool(name: str, value: Any) -> bool:
    """Accept real booleans and their common string spellings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable rule-variant definition.

    Args:
        forced_capture: A side must capture whenever any capture exists.
        backward_capture: Regular pieces may also capture backward.
        no_moves_loses: A side left without a legal move loses. When off,
            a game only ends once a side has no pieces.
    """

    forced_capture: bool = True
    backward_capture: bool = False
    no_moves_loses: bool = False

    @classmethod
    def standard(cls) -> RuleSet:
        """Forced forward-only captures, count-based win."""
        return cls()

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RuleSet:
        """Build a rule set from loosely typed options (e.g. lobby settings).

        Missing keys keep their defaults, ``None`` values are ignored.
        Raises:
            ValueError: unknown key or a value that is not boolean-like.
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for name, value in options.items():
            if name not in known:
                raise ValueError(f"Unknown rule option: {name!r}")
            if value is None:
                continue
            values[name] = _to_bool(name, value)
        return cls(**values)

    def as_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
