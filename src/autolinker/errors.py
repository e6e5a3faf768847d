"""Exception classes for autolinker.

Only configuration misuse is fatal. Malformed HTML and implausible candidate
matches are never errors: the scanner falls back to text and the match rules
simply drop the candidate.
"""

from __future__ import annotations


class AutolinkerError(Exception):
    """Base exception for all autolinker errors."""

    pass


class ConfigError(AutolinkerError):
    """Invalid configuration value.

    Raised when a LinkerConfig is constructed, never while linking.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            option: Name of the offending option (e.g., "hashtag")
            message: Description of what is wrong with the value
        """
        self.option = option
        super().__init__(f"Invalid '{option}' option: {message}")


class RenderError(AutolinkerError):
    """A match could not be turned into an anchor tag."""

    pass
