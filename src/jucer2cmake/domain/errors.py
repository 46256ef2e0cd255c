from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition of a translation run maps to one of these exception
types. Interfaces catch the base class and render a single diagnostic line.
"""


class Jucer2CMakeError(Exception):
    """Base class for all expected translation failures."""


class UsageError(Jucer2CMakeError):
    """Raised when the command line does not match the expected arguments."""


class ConfigError(Jucer2CMakeError):
    """Raised when a configuration file or value cannot be used."""


class ProjectFileError(Jucer2CMakeError):
    """
    Raised when the project descriptor is unreadable, malformed,
    or does not carry the expected root element.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"{path} is not a valid Jucer project.")


class PropertyTypeError(Jucer2CMakeError):
    """
    Raised by typed node accessors when a property is present but its value
    cannot be read as the requested type.
    """

    def __init__(self, node_type: str, key: str, value: object, expected: str):
        self.node_type = node_type
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(
            f"Property '{key}' of <{node_type}> is not {expected}: {value!r}"
        )


class UnsupportedProjectTypeError(Jucer2CMakeError):
    """Raised when an output flavour has no counterpart for the project type."""
