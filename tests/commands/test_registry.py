"""Unit tests for the command registry and the construction protocol."""

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

import pytest

from simplerrd.commands import registry
from simplerrd.commands.graph import Area, Comment, GPrint, Line, Print
from simplerrd.commands.interfaces import Command, Configurable, VnameProducer
from simplerrd.commands.registry import create_command, get_registered_commands, register_command
from simplerrd.utils.exceptions import (
    CommandAlreadyRegisteredError,
    NotADataclassTypeError,
    UnexpectedArgumentError,
    UnknownCommandError,
)


def test_builtin_commands_registered() -> None:
    """All five directives are available by keyword."""
    assert get_registered_commands() == {
        "PRINT": Print,
        "GPRINT": GPrint,
        "COMMENT": Comment,
        "LINE": Line,
        "AREA": Area,
    }


def test_create_command_case_insensitive() -> None:
    """Keywords are matched case-insensitively and params go to the config."""
    cpu = SimpleNamespace(vname="cpu")
    command = create_command("line", data=cpu, color="red", text="CPU")
    assert isinstance(command, Line)
    assert command.definition() == "LINE1:cpu#red:CPU"
    assert create_command("Comment", text="Report").definition() == "COMMENT:Report"


def test_create_command_unknown_keyword() -> None:
    """Unknown keywords raise UnknownCommandError."""
    with pytest.raises(UnknownCommandError, match="Unknown command: HRULE"):
        create_command("HRULE", value=1)


def test_create_command_unknown_option() -> None:
    """Unknown options raise UnexpectedArgumentError listing them sorted."""
    with pytest.raises(UnexpectedArgumentError, match="Print got unexpected argument\\(s\\): colour, legend"):
        create_command("PRINT", legend="x", colour="red")


def test_register_duplicate_keyword() -> None:
    """A keyword can only be registered once."""

    class OtherLine(Command):
        keyword = "line"

        def definition(self) -> str:
            return "LINE1:x"

    with pytest.raises(CommandAlreadyRegisteredError, match="Command 'LINE' already registered."):
        register_command(OtherLine)


def test_register_custom_command(monkeypatch: pytest.MonkeyPatch) -> None:
    """Third-party commands can join the registry."""
    monkeypatch.setattr(registry, "_COMMAND_REGISTRY", dict(get_registered_commands()))

    @dataclass(frozen=True)
    class HRuleConfig:
        value: float | None = None
        color: str = "ff0000"

    @register_command
    class HRule(Command, Configurable[HRuleConfig]):
        keyword = "HRULE"

        def __init__(self, **params: Any) -> None:  # noqa: ANN401
            super().__init__(HRuleConfig, **params)

        def definition(self) -> str:
            return f"HRULE:{self.config.value:g}#{self.config.color}"

    assert create_command("hrule", value=50).definition() == "HRULE:50#ff0000"
    assert get_registered_commands()["HRULE"] is HRule


def test_configurable_requires_dataclass() -> None:
    """Config classes must be dataclasses."""

    class NotADataclass:
        pass

    with pytest.raises(NotADataclassTypeError):
        Configurable(NotADataclass)


def test_vname_producer_protocol() -> None:
    """Any object with a vname attribute qualifies as a series reference."""
    assert isinstance(SimpleNamespace(vname="cpu"), VnameProducer)
    assert not isinstance(object(), VnameProducer)
