"""Exceptions raised by the scorekeeper.

Everything the CLI reports to the user derives from PhaseKeeperError.
"""


class PhaseKeeperError(Exception):
    """Base class for all scorekeeper errors."""
    pass


class InvalidName(PhaseKeeperError, ValueError):
    """A player name was empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid player name: {name!r}. Names cannot be empty.")


class SessionError(PhaseKeeperError):
    """A session was set up or driven incorrectly."""
    pass


class RoundCountMismatch(SessionError):
    """A round was recorded with the wrong number of results."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected} round results (one per player), got {got}")


class ConfigError(PhaseKeeperError):
    """The configuration file is missing or invalid."""
    pass
