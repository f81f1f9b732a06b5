"""Reusable fields and accessor mixins shared by the graph commands.

Each attribute comes in two halves: a frozen dataclass holding the field, which
command configs inherit from, and a mixin exposing a property getter and setter
on the command itself. Setters go through ``Configurable._update`` so the
config's ``__post_init__`` validation runs on every change.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from simplerrd.commands.interfaces import VnameProducer
from simplerrd.config import get_settings
from simplerrd.utils.exceptions import (
    InvalidColorError,
    InvalidDashOffsetError,
    InvalidDashPatternError,
    InvalidWidthError,
)

INVISIBLE = "invisible"

_HEX_COLOR = re.compile(r"#?(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


def coerce_width(width: Any) -> int:  # noqa: ANN401
    """Truncate *width* to an integer and check that it is positive.

    Args:
        width (Any): Anything ``int()`` accepts, e.g. ``2``, ``2.7`` or ``"3"``.

    Returns:
        int: The truncated width.

    Raises:
        InvalidWidthError: If the value cannot be converted or is not > 0.
    """
    try:
        w = int(width)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidWidthError(width) from exc
    if w <= 0:
        raise InvalidWidthError(width)
    return w


def is_invisible(color: str | None) -> bool:
    """Return True when *color* means "draw nothing": unset or the invisible sentinel."""
    return color is None or color == INVISIBLE


def color_token(color: str) -> str:
    """Return the text that follows ``#`` in a directive for *color*.

    Hex values lose their optional leading ``#``; symbolic names from the
    configured palette are passed through unchanged.

    Raises:
        InvalidColorError: If *color* is neither hex nor a configured name.
    """
    if isinstance(color, str):
        if _HEX_COLOR.fullmatch(color):
            return color.removeprefix("#")
        palette = {name.lower() for name in get_settings().simplerrd.commands.colors}
        if color.lower() in palette:
            return color
    raise InvalidColorError(color)


def normalize_dashes(dashes: Any) -> bool | tuple[float, ...]:  # noqa: ANN401
    """Turn the ``dashes`` option into either a flag or a validated pattern.

    Args:
        dashes (Any): ``None``/``False`` (solid), ``True`` (default 5px dashes),
            a single positive number, or an iterable of one or an even number
            of finite positive numbers.

    Returns:
        bool | tuple[float, ...]: A flag or the on/off segment lengths.

    Raises:
        InvalidDashPatternError: If the pattern is malformed.
    """
    if dashes is None or isinstance(dashes, bool):
        return bool(dashes)
    if isinstance(dashes, (int, float)):
        dashes = (dashes,)
    if isinstance(dashes, str) or not isinstance(dashes, Iterable):
        raise InvalidDashPatternError(dashes)
    try:
        pattern = tuple(float(v) for v in dashes)
    except (TypeError, ValueError) as exc:
        raise InvalidDashPatternError(dashes) from exc
    if not pattern or (len(pattern) > 1 and len(pattern) % 2) or any(not 0 < v < math.inf for v in pattern):
        raise InvalidDashPatternError(dashes)
    return pattern


def normalize_dash_offset(offset: Any) -> float | None:  # noqa: ANN401
    """Validate a dash offset, keeping ``None`` as "not set".

    Raises:
        InvalidDashOffsetError: If the offset is not a finite number >= 0.
    """
    if offset is None:
        return None
    try:
        value = float(offset)
    except (TypeError, ValueError) as exc:
        raise InvalidDashOffsetError(offset) from exc
    if not 0 <= value < math.inf:
        raise InvalidDashOffsetError(offset)
    return value


# ---------------------------------------------------------------------------
# Config fields
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TextFields:
    """Free text: a legend, a comment or a PRINT format."""

    text: str | None = None


@dataclass(frozen=True)
class ValueFields:
    """Series whose consolidated value gets printed."""

    value: VnameProducer | None = None


@dataclass(frozen=True)
class DataFields:
    """Series that gets drawn."""

    data: VnameProducer | None = None


@dataclass(frozen=True)
class ColorFields:
    """Drawing color; validated by the command that renders it."""

    color: str | None = None


@dataclass(frozen=True)
class StackFields:
    """Whether the element is drawn on top of the previous one."""

    stack: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "stack", bool(self.stack))


# ---------------------------------------------------------------------------
# Accessor mixins
# ---------------------------------------------------------------------------
class TextAttribute:
    """Exposes ``text``."""

    @property
    def text(self) -> str | None:
        """Current ``text`` field."""
        return self.config.text  # type: ignore[attr-defined]

    @text.setter
    def text(self, value: str | None) -> None:
        """Set ``text``, re-validating the config."""
        self._update(text=value)  # type: ignore[attr-defined]


class ValueAttribute:
    """Exposes ``value``."""

    @property
    def value(self) -> VnameProducer | None:
        """Current ``value`` field."""
        return self.config.value  # type: ignore[attr-defined]

    @value.setter
    def value(self, value: VnameProducer | None) -> None:
        """Set ``value``, re-validating the config."""
        self._update(value=value)  # type: ignore[attr-defined]


class DataAttribute:
    """Exposes ``data``."""

    @property
    def data(self) -> VnameProducer | None:
        """Current ``data`` field."""
        return self.config.data  # type: ignore[attr-defined]

    @data.setter
    def data(self, value: VnameProducer | None) -> None:
        """Set ``data``, re-validating the config."""
        self._update(data=value)  # type: ignore[attr-defined]


class ColorAttribute:
    """Exposes ``color`` plus the helpers renderers need to emit it."""

    @property
    def color(self) -> str | None:
        """Current ``color`` field."""
        return self.config.color  # type: ignore[attr-defined]

    @color.setter
    def color(self, value: str | None) -> None:
        """Set ``color``, re-validating the config."""
        self._update(color=value)  # type: ignore[attr-defined]

    @property
    def invisible(self) -> bool:
        """True when the element is drawn without color."""
        return is_invisible(self.color)

    def _color_segment(self) -> str:
        """Return ``#<color>``, or an empty string for invisible elements.

        Raises:
            InvalidColorError: If the color is not recognized.
        """
        if self.invisible:
            return ""
        return f"#{color_token(self.color)}"  # type: ignore[arg-type]


class StackAttribute:
    """Exposes ``stack``."""

    @property
    def stack(self) -> bool:
        """Current ``stack`` field."""
        return self.config.stack  # type: ignore[attr-defined]

    @stack.setter
    def stack(self, value: bool) -> None:
        """Set ``stack``, re-validating the config."""
        self._update(stack=value)  # type: ignore[attr-defined]
