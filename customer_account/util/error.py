"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration is missing or unsafe for the environment."""

    pass


class DependencyInjectionError(UtilError):
    """Provider wiring requested a component that does not exist."""

    pass
