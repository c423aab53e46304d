"""
Part selection and the per-run request.
"""

from enum import Enum
from typing import NamedTuple

from esb_fireplace.errors import InvalidPart, MissingPart

class Part(Enum):
    PT1 = "1"
    PT2 = "2"

    def __str__(self): return self.value

def parse_part(token) -> Part:
    """
    Maps "1" to PT1 and "2" to PT2.

    Matching is exact (no stripping, no int conversion); anything else raises
    InvalidPart.
    """
    if isinstance(token, str):
        for part in Part:
            if part.value == token: return part
    raise InvalidPart(token)

class RunRequest(NamedTuple):
    """What to run: the part, plus extra arguments for the solver (in order)."""
    part: Part
    args: tuple = ()

    @classmethod
    def create(cls, part, args=None):
        """Builds a request from a Part (or part token) and any iterable of args."""
        if not isinstance(part, Part):
            part = parse_part(part)
        return cls(part, tuple(args) if args is not None else ())

    @classmethod
    def from_namespace(cls, ns):
        """
        Builds a request from parsed command line flags (see cli.build_parser).

        A missing part is reported before any attempt to parse it.
        """
        token = getattr(ns, "part", None)
        if token is None:
            raise MissingPart()
        return cls.create(token, getattr(ns, "args", None))
