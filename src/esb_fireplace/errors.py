"""
Errors raised while running a solution.

Everything the runner raises derives from FireplaceError, so a solution script
only ever has one exception type to deal with.
"""

class FireplaceError(Exception):
    """Base class for all runner failures."""

class MissingPart(FireplaceError):
    """No --part flag was given."""

    def __init__(self):
        super().__init__(
            "Missing part, please use 1 or 2 as argument for --part flag.")

class InvalidPart(FireplaceError):
    """A --part flag was given, but it was neither "1" nor "2"."""

    def __init__(self, token=None):
        super().__init__(
            "Invalid part, please use 1 or 2 as argument for --part flag.")
        self.token = token

class InputFailure(FireplaceError):
    """The puzzle input could not be read."""

class SolverFailure(FireplaceError):
    """
    The solver itself failed.

    Only the textual description of the solver's error is kept; the original
    exception (if any) is available as __cause__.
    """

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description
