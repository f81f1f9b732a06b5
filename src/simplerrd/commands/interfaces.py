"""Stable abstract interfaces shared by every graph command."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import fields, is_dataclass, replace
from typing import Any, Protocol, runtime_checkable

from simplerrd.utils.exceptions import NotADataclassTypeError, UnexpectedArgumentError


# Define a type-safe protocol for dataclass types
@runtime_checkable
class DataclassType(Protocol):
    """Protocol for a dataclass type."""

    __dataclass_fields__: dict


@runtime_checkable
class VnameProducer(Protocol):
    """Anything defining a named series (DEF, CDEF, VDEF) that directives can reference."""

    @property
    def vname(self) -> str:
        """Name under which rrdtool knows the series."""
        raise NotImplementedError


class Configurable[ConfigT: DataclassType]:
    """Base class for objects that can be configured with a dataclass."""

    def __init__(self, config_cls: type[ConfigT], **params: Any) -> None:  # noqa: ANN401
        """Initialize the object with a configuration dataclass and parameters.

        Raises:
            NotADataclassTypeError: If *config_cls* is not a dataclass type.
            UnexpectedArgumentError: If any parameter is not part of the configuration dataclass.
        """
        if not is_dataclass(config_cls):
            raise NotADataclassTypeError(config_cls)
        valid_keys = {f.name for f in fields(config_cls)}
        if invalid := set(params) - valid_keys:
            raise UnexpectedArgumentError(list(invalid), self.__class__.__name__)
        self.config: ConfigT = config_cls(**params)

    def _update(self, **changes: Any) -> None:  # noqa: ANN401
        """Swap in a copy of the frozen config with *changes* applied.

        The copy goes through ``__post_init__`` again, so setters validate exactly
        like the constructor does.
        """
        self.config = replace(self.config, **changes)  # type: ignore[type-var]


class Command(ABC):
    """A single directive line passed to ``rrdtool graph``."""

    #: Keyword under which the command is registered, e.g. ``"LINE"``.
    keyword: str = ""

    @abstractmethod
    def definition(self) -> str:
        """Render the directive.

        Returns:
            str: The directive string, e.g. ``"LINE1:cpu#ff0000:CPU"``.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Same as :meth:`definition`."""
        return self.definition()
