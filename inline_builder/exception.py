"""
Exceptions for the entire program.
"""
from typing import Any


class BuilderError(Exception):
    """
    Generic base class for all errors raised by this package.

    Errors raised by caller-supplied configuration functions are never wrapped in this class.
    """


class ConfigError(BuilderError):
    """
    Exception raised when loading config gives an exception.

    :param message: Explanation of the error.
    :param value: The value that caused the error e.g. the path of the offending file.
    """
    def __init__(self, message: str = "Could not load config", value: Any | None = None):
        self.message = message
        self.value = value

        super().__init__(f"{message}: value='{value}'" if value is not None else message)
