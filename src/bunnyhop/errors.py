"""Custom exception hierarchy for bunnyhop."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class UsageError(ValueError, AppError):
    """Command usage or user-input errors."""


class RegistrationError(ValueError, AppError):
    """Command descriptor list violates a registry invariant."""


class ConfigError(ValueError, AppError):
    """Config file/configuration validation errors."""
