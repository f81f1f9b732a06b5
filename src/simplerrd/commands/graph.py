"""Graph directives: PRINT, GPRINT, COMMENT, LINE and AREA.

Every command is configured with keyword arguments matching the fields of its
config dataclass and renders a single directive through ``definition()``::

    >>> cpu = SimpleNamespace(vname="cpu")
    >>> Line(data=cpu, color="ff0000", text="CPU", width=2).definition()
    'LINE2:cpu#ff0000:CPU'
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from simplerrd.commands.attributes import (
    ColorAttribute,
    ColorFields,
    DataAttribute,
    DataFields,
    StackAttribute,
    StackFields,
    TextAttribute,
    TextFields,
    ValueAttribute,
    ValueFields,
    coerce_width,
    normalize_dash_offset,
    normalize_dashes,
)
from simplerrd.commands.interfaces import Command, Configurable
from simplerrd.commands.registry import register_command
from simplerrd.config import get_settings
from simplerrd.utils.exceptions import DashOffsetWithoutDashesError, LegendOnInvisibleError, MissingRequiredFieldError
from simplerrd.utils.logger import logger


def _default_line_width() -> int:
    return get_settings().simplerrd.commands.line_width


def _format_number(n: float) -> str:
    return str(int(n)) if n.is_integer() else repr(n)


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PrintConfig(TextFields, ValueFields):
    """Configuration for PRINT and GPRINT.

    Attributes:
        value (VnameProducer | None): The VDEF (or legacy DEF/CDEF) to print.
        text (str | None): Format string, interpreted by rrdtool (``%6.2lf %s``...).
        strftime (bool): Print the time component of the VDEF instead of its value.
    """

    strftime: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "strftime", bool(self.strftime))


@dataclass(frozen=True)
class CommentConfig(TextFields):
    """Configuration for COMMENT."""


@dataclass(frozen=True)
class AreaConfig(TextFields, DataFields, ColorFields, StackFields):
    """Configuration for AREA.

    Attributes:
        data (VnameProducer | None): The series to fill under.
        color (str | None): Hex ``RRGGBB[AA]``, a palette name, ``"invisible"`` or None.
        text (str | None): Legend.
        stack (bool): Stack on top of the previous LINE or AREA.
    """


@dataclass(frozen=True)
class LineConfig(TextFields, DataFields, ColorFields, StackFields):
    """Configuration for LINE.

    Attributes:
        data (VnameProducer | None): The series to draw.
        color (str | None): Hex ``RRGGBB[AA]``, a palette name, ``"invisible"`` or None.
        text (str | None): Legend.
        stack (bool): Stack on top of the previous LINE or AREA.
        width (int): Line width in pixels, truncated to an integer.
        dashes (bool | tuple[float, ...]): ``True`` for rrdtool's default dashes or an
            explicit on/off pattern.
        dash_offset (float | None): Offset into the dash pattern.
    """

    width: int = field(default_factory=_default_line_width)
    dashes: bool | tuple[float, ...] = False
    dash_offset: float | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "width", coerce_width(self.width))
        object.__setattr__(self, "dashes", normalize_dashes(self.dashes))
        object.__setattr__(self, "dash_offset", normalize_dash_offset(self.dash_offset))


# ---------------------------------------------------------------------------
# Text directives
# ---------------------------------------------------------------------------
@register_command
class Print(TextAttribute, ValueAttribute, Command, Configurable[PrintConfig]):
    """PRINT:vname:format[:strftime].

    Prints the value (or, with ``strftime``, the time) of a VDEF to stdout of
    ``rrdtool graph``. Any text in the format is printed literally except for
    percent formatters:

    - ``%%`` prints a literal percent sign.
    - ``%#.#le`` prints numbers like 1.2346e+04, ``%#.#lf`` like 12345.6789,
      with optional field width and precision.
    - ``%s`` after ``%le``/``%lf``/``%lg`` is replaced by the SI magnitude unit
      and the value is scaled accordingly (123456 -> 123.456 k).
    - ``%S`` reuses the previously chosen magnitude unit, defining one like
      ``%s`` if none exists yet and the value is not zero.

    The format is emitted as is; rrdtool is the one interpreting it.
    """

    keyword = "PRINT"

    def __init__(self, **params: Any) -> None:  # noqa: ANN401
        """Initialize the command with fields from *params* (``value``, ``text``, ``strftime``)."""
        super().__init__(PrintConfig, **params)

    @property
    def strftime(self) -> bool:
        """Current ``strftime`` field."""
        return self.config.strftime

    @strftime.setter
    def strftime(self, enabled: bool) -> None:
        """Set ``strftime``, re-validating the config."""
        self._update(strftime=enabled)

    def definition(self) -> str:
        """Render ``<KEYWORD>:<vname>:<text>[:strftime]``.

        Returns:
            str: The directive.

        Raises:
            MissingRequiredFieldError: If ``value`` or ``text`` is not set.
        """
        if self.value is None:
            raise MissingRequiredFieldError("Value")
        if self.text is None:
            raise MissingRequiredFieldError("Text")
        directive = f"{self.keyword}:{self.value.vname}:{self.text}"
        if self.strftime:
            directive += ":strftime"
        logger.debug("Built directive %s", directive)
        return directive


@register_command
class GPrint(Print):
    """GPRINT:vname:format[:strftime].

    Same as PRINT, but printed inside the graph.
    """

    keyword = "GPRINT"


@register_command
class Comment(TextAttribute, Command, Configurable[CommentConfig]):
    """COMMENT:text.

    Text is printed literally in the legend section of the graph. Colons must be
    escaped as ``\\:`` by the caller, the same way as in PRINT formats.
    """

    keyword = "COMMENT"

    def __init__(self, **params: Any) -> None:  # noqa: ANN401
        """Initialize the command with its ``text``."""
        super().__init__(CommentConfig, **params)

    def definition(self) -> str:
        """Render ``COMMENT:<text>``.

        Raises:
            MissingRequiredFieldError: If ``text`` is not set.
        """
        if self.text is None:
            raise MissingRequiredFieldError("Text")
        directive = f"{self.keyword}:{self.text}"
        logger.debug("Built directive %s", directive)
        return directive


# ---------------------------------------------------------------------------
# Drawing directives
# ---------------------------------------------------------------------------
class DrawCommand[ConfigT: (AreaConfig, LineConfig)](
    TextAttribute,
    DataAttribute,
    ColorAttribute,
    StackAttribute,
    Command,
    Configurable[ConfigT],
):
    """Base class for elements drawn from a series: LINE and AREA.

    Without a color the element is drawn invisibly, which is useful as a base
    to stack other elements on; such an element cannot carry a legend. The
    legend field is positional, so it is emitted empty whenever a modifier such
    as ``STACK`` follows it.
    """

    def _prefix(self) -> str:
        """Directive keyword, including anything glued to it (LINE width)."""
        return self.keyword

    def _modifiers(self) -> list[str]:
        """Fields appended after the legend, in rrdtool's order."""
        return ["STACK"] if self.stack else []

    def definition(self) -> str:
        """Render ``<PREFIX>:<vname>[#<color>][:[<text>][:<modifier>...]]``.

        Returns:
            str: The directive.

        Raises:
            MissingRequiredFieldError: If ``data`` is not set.
            LegendOnInvisibleError: If a legend is set on an invisible element.
            InvalidColorError: If the color is not recognized.
        """
        if self.data is None:
            raise MissingRequiredFieldError("Data")
        if self.text and self.invisible:
            raise LegendOnInvisibleError()
        directive = f"{self._prefix()}:{self.data.vname}{self._color_segment()}"
        if modifiers := self._modifiers():
            directive += f":{self.text or ''}:" + ":".join(modifiers)
        elif self.text:
            directive += f":{self.text}"
        logger.debug("Built directive %s", directive)
        return directive


@register_command
class Line(DrawCommand[LineConfig]):
    """LINE[width]:vname[#color][:[legend][:STACK]][:dashes[=on,off...]][:dash-offset=offset].

    Draws a line of the given width. With ``stack`` the line is drawn on top of
    the previous LINE or AREA. ``dashes=True`` gives a symmetric dash of 5
    pixels; a pattern of one or an even number of lengths alternates on and off
    segments, and ``dash_offset`` shifts where the pattern starts.
    """

    keyword = "LINE"

    def __init__(self, **params: Any) -> None:  # noqa: ANN401
        """Initialize the line; ``width`` defaults to the configured line width.

        Raises:
            InvalidSettingsError: If no width is given and the settings file is invalid.
        """
        super().__init__(LineConfig, **params)

    @property
    def width(self) -> int:
        """Current ``width`` field."""
        return self.config.width

    @width.setter
    def width(self, width: int) -> None:
        """Set ``width``, re-validating the config."""
        self._update(width=width)

    @property
    def dashes(self) -> bool | tuple[float, ...]:
        """Current ``dashes`` field."""
        return self.config.dashes

    @dashes.setter
    def dashes(self, dashes: bool | Iterable[float] | float | None) -> None:
        """Set ``dashes``, re-validating the config."""
        self._update(dashes=dashes)

    @property
    def dash_offset(self) -> float | None:
        """Current ``dash_offset`` field."""
        return self.config.dash_offset

    @dash_offset.setter
    def dash_offset(self, offset: float | None) -> None:
        """Set ``dash_offset``, re-validating the config."""
        self._update(dash_offset=offset)

    def _prefix(self) -> str:
        return f"{self.keyword}{self.width}"

    def _modifiers(self) -> list[str]:
        """Add the dash settings after STACK.

        Raises:
            DashOffsetWithoutDashesError: If an offset is set for a solid line.
        """
        modifiers = super()._modifiers()
        if not self.dashes:
            if self.dash_offset is not None:
                raise DashOffsetWithoutDashesError()
            return modifiers
        if self.dashes is True:
            modifiers.append("dashes")
        else:
            modifiers.append("dashes=" + ",".join(_format_number(n) for n in self.dashes))
        if self.dash_offset is not None:
            modifiers.append(f"dash-offset={_format_number(self.dash_offset)}")
        return modifiers


@register_command
class Area(DrawCommand[AreaConfig]):
    """AREA:vname[#color][:[legend][:STACK]].

    Like LINE, but the area between the x-axis and the line is filled.
    """

    keyword = "AREA"

    def __init__(self, **params: Any) -> None:  # noqa: ANN401
        """Initialize the area from its fields."""
        super().__init__(AreaConfig, **params)


def definitions(commands: Iterable[Command]) -> list[str]:
    """Render several commands in the order given.

    Args:
        commands (Iterable[Command]): Commands to render; drawing order and thus
            stacking order follow this sequence.

    Returns:
        list[str]: One directive per command.
    """
    return [command.definition() for command in commands]
