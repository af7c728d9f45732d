# console_scout/errors.py
"""Tool-level failures. Page signals are data, not errors, and never end up here."""


class ConsoleScoutError(Exception):
    """Base exception for console_scout."""


class LaunchError(ConsoleScoutError):
    """Raised when the browser process or its page cannot be started."""


class NavigationError(ConsoleScoutError):
    """Raised when navigation to the target fails (DNS, refused connection, ...)."""


class NavigationTimeout(NavigationError):
    """Raised when network quiescence is not reached within the hard timeout."""


__all__ = ["ConsoleScoutError", "LaunchError", "NavigationError", "NavigationTimeout"]
