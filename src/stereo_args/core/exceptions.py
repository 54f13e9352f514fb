"""Exceptions raised while parsing command-line arguments."""


class ArgumentError(ValueError):
    "Base exception for malformed or inconsistent command-line input."
    pass


class UsageError(ArgumentError):
    "Positional arguments do not have the expected shape."
    pass


class PathValidationError(ArgumentError):
    "A referenced image or camera file does not exist."
    pass


class ParseError(ArgumentError):
    "An option value could not be turned into a structured value."
    pass


class MissingParameter(ParseError):
    pass


class InvalidValue(ParseError):
    pass


class EnvironmentSetupError(ArgumentError):
    pass
