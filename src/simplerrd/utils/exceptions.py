"""Custom exceptions for the application."""

from pathlib import Path


class UnknownCommandError(Exception):
    """Exception raised for unknown directive keywords.

    Attributes:
        command (str): The keyword that caused the exception.
    """

    def __init__(self, command: str) -> None:
        """Initialize the exception with the unknown keyword.

        Args:
            command (str): The keyword that caused the exception.
        """
        super().__init__(f"Unknown command: {command}")


class CommandAlreadyRegisteredError(ValueError):
    """Exception raised when a directive keyword is already registered."""

    def __init__(self, keyword: str) -> None:
        """Initialize the exception with the directive keyword.

        Args:
            keyword (str): The keyword that is already registered.
        """
        super().__init__(f"Command '{keyword}' already registered.")


class MissingRequiredFieldError(ValueError):
    """Exception raised when a command is rendered without one of its mandatory fields."""

    def __init__(self, field: str) -> None:
        """Initialize the exception with a custom message.

        Args:
            field (str): Display name of the missing field, e.g. ``"Value"``.
        """
        super().__init__(f"{field} required but not set")


class InvalidFieldValueError(ValueError):
    """Base class for field values rejected by local validation."""


class InvalidWidthError(InvalidFieldValueError):
    """Exception raised when a line width is not a positive integer."""

    def __init__(self, width: object) -> None:
        """Initialize the exception with the offending width.

        Args:
            width (object): The rejected width value.
        """
        super().__init__(f"Width must be a number >0, got {width!r}")


class InvalidColorError(InvalidFieldValueError):
    """Exception raised when a color is neither hex, a known name, nor invisible."""

    def __init__(self, color: object) -> None:
        """Initialize the exception with the offending color.

        Args:
            color (object): The rejected color value.
        """
        super().__init__(f"Unrecognized color {color!r}; use RRGGBB[AA], a known color name or 'invisible'")


class InvalidDashPatternError(InvalidFieldValueError):
    """Exception raised when a dash pattern has the wrong length or non-positive segments."""

    def __init__(self, pattern: object) -> None:
        """Initialize the exception with the offending pattern.

        Args:
            pattern (object): The rejected dash pattern.
        """
        super().__init__(f"Dash pattern must be one or an even number of positive values, got {pattern!r}")


class InvalidDashOffsetError(InvalidFieldValueError):
    """Exception raised when a dash offset is negative or not a number."""

    def __init__(self, offset: object) -> None:
        """Initialize the exception with the offending offset.

        Args:
            offset (object): The rejected dash offset.
        """
        super().__init__(f"Dash offset must be a number >=0, got {offset!r}")


class ConflictingFieldsError(ValueError):
    """Base class for field combinations that cannot be rendered together."""


class LegendOnInvisibleError(ConflictingFieldsError):
    """Exception raised when a legend is attached to an invisible line or area."""

    def __init__(self) -> None:
        """Initialize the exception with a custom message."""
        super().__init__("Text specified, but color set to invisible")


class DashOffsetWithoutDashesError(ConflictingFieldsError):
    """Exception raised when a dash offset is given for a solid line."""

    def __init__(self) -> None:
        """Initialize the exception with a custom message."""
        super().__init__("Dash offset specified, but dashes not enabled")


class UnexpectedArgumentError(TypeError):
    """Exception raised when a command receives unexpected keyword arguments."""

    def __init__(self, invalid_args: list[str], cls: str) -> None:
        """Initialize with the list of invalid argument names.

        Args:
            invalid_args (list[str]): The unexpected argument names.
            cls (str): The class that raised the error.
        """
        args_str = ", ".join(sorted(invalid_args))
        super().__init__(f"{cls} got unexpected argument(s): {args_str}")


class NotADataclassTypeError(TypeError):
    """Exception raised when a provided class is not a dataclass type."""

    def __init__(self, config_cls: type) -> None:
        """Initialize with the offending class type.

        Args:
            config_cls (type): The class that is not a dataclass.
        """
        super().__init__(f"{config_cls} must be a dataclass type")


class SettingsReadOnlyError(AttributeError):
    """Exception raised when attempting to modify a read-only Settings object."""

    def __init__(self) -> None:
        """Initialize the exception with a custom message."""
        super().__init__("Settings object is read-only")


class MissingSimpleRRDKeyError(KeyError):
    """Exception raised when the top-level 'simplerrd' key is missing in the YAML configuration."""

    def __init__(self) -> None:
        """Initialize the exception with a custom message."""
        super().__init__("Top-level 'simplerrd' key missing in YAML.")


class InvalidSettingsError(ValueError):
    """Exception raised when a settings file fails validation."""

    def __init__(self, path: Path, details: object) -> None:
        """Initialize the exception with the file and the validation report.

        Args:
            path (Path): The settings file that was rejected.
            details (object): The validation error describing what is wrong.
        """
        super().__init__(f"Invalid configuration file {path}:\n{details}")
