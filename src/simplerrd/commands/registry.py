"""Registry of Command subclasses keyed by their rrdtool directive keyword."""

from typing import Any

from simplerrd.commands.interfaces import Command
from simplerrd.utils.exceptions import CommandAlreadyRegisteredError, UnknownCommandError
from simplerrd.utils.logger import logger

_COMMAND_REGISTRY: dict[str, type[Command]] = {}


def register_command[CommandT: Command](command_cls: type[CommandT]) -> type[CommandT]:
    """Class decorator to register a Command subclass.

    Usage::

        @register_command
        class Line(Command):
            keyword = "LINE"

    Registered under its upper-cased ``keyword``.

    Args:
        command_cls (type[CommandT]): A subclass of Command.

    Returns:
        type[CommandT]: The registered command class.

    Raises:
        CommandAlreadyRegisteredError: If the keyword is already registered.
    """
    if (keyword := command_cls.keyword.upper()) in _COMMAND_REGISTRY:
        raise CommandAlreadyRegisteredError(keyword)
    _COMMAND_REGISTRY[keyword] = command_cls
    logger.debug("Registered %s as %s", command_cls.__name__, keyword)
    return command_cls


def get_registered_commands() -> dict[str, type[Command]]:
    """Return mapping of directive keywords to Command subclasses.

    Returns:
        dict[str, type[Command]]: Mapping of keywords to Command subclasses.
    """
    return dict(_COMMAND_REGISTRY)


def create_command(keyword: str, **params: Any) -> Command:  # noqa: ANN401
    """Build a command from its directive keyword and a configuration map.

    Args:
        keyword (str): Directive keyword, case-insensitive (``"line"``, ``"GPRINT"``...).
        **params: Fields of the command, e.g. ``data=cpu, color="ff0000"``.

    Returns:
        Command: The configured command.

    Raises:
        UnknownCommandError: If no command is registered under *keyword*.
    """
    # Importing the built-in commands populates the registry.
    import simplerrd.commands.graph  # noqa: F401, PLC0415  # pylint: disable=import-outside-toplevel

    try:
        command_cls = _COMMAND_REGISTRY[keyword.upper()]
    except KeyError as exc:
        raise UnknownCommandError(keyword) from exc
    return command_cls(**params)
