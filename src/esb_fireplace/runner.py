"""
The run protocol: load input, call exactly one solver, report the answer.

Solvers are plain callables taking (input_data, args) where args is a list of
strings (possibly empty). They may return any printable value and may raise
any exception; failures come back out of dispatch() as SolverFailure.

Example usage:

from esb_fireplace.inputs import FixedReader
from esb_fireplace.parts import RunRequest
from esb_fireplace.runner import run

def solve_pt1(input_data, args):
    return " ".join(args) if args else input_data.strip()

def solve_pt2(input_data, args):
    return 2

run(solve_pt1, solve_pt2, FixedReader("abc\n"), RunRequest.create("1"))
"""

import logging
import sys
import time
from inspect import signature
from typing import Any, NamedTuple

from esb_fireplace.errors import SolverFailure
from esb_fireplace.parts import Part, parse_part

logger = logging.getLogger(__name__)

class Answer(NamedTuple):
    """A solver's result, tagged with the part that produced it."""
    part: Part
    value: Any

    def __str__(self): return str(self.value)

def call_solver(solver, input_data: str, args: list):
    """
    Calls the solver, converting any failure into a SolverFailure.

    The description is str() of the solver's exception, or its class name if
    that is empty.
    """
    try:
        call = _call_form(solver, input_data, args)
        if call is not None:
            return solver(*call[0], **call[1])
        if args:
            logger.warning("solver %s takes no arguments, ignoring --args=%s",
                           getattr(solver, "__name__", solver), args)
        return solver(input_data)
    except SolverFailure:
        raise
    except Exception as exc:
        raise SolverFailure(str(exc) or type(exc).__name__) from exc

def _call_form(solver, input_data, args):
    """
    Returns (positional, keywords) to call the solver with its args, or None if
    it can only be called with the input alone.

    solve(input_data, args) is preferred; solve(input_data, *, args) is used when
    args is keyword-only.
    """
    full = ((input_data, args), {})
    try:
        sig = signature(solver)
    except (TypeError, ValueError):
        # no signature available (e.g. some builtins), assume the full form
        return full
    for call in (full, ((input_data,), {"args": args})):
        try:
            sig.bind(*call[0], **call[1])
        except TypeError:
            continue
        return call
    return None

class Stopwatch:
    """
    Wraps a solver-calling function, recording how long the last call took.

    Time is measured with perf_counter_ns() and kept in elapsed_ns (also set
    when the call raises).
    """

    def __init__(self, fn=call_solver):
        self._fn = fn
        self.elapsed_ns = None

    __slots__ = ("_fn", "elapsed_ns")

    def __call__(self, solver, input_data, args):
        start = time.perf_counter_ns()
        try:
            return self._fn(solver, input_data, args)
        finally:
            self.elapsed_ns = time.perf_counter_ns() - start

def dispatch(solve_pt1, solve_pt2, reader, request, invoke=call_solver) -> Answer:
    """
    Loads the input from reader and runs the solver selected by request.part.

    Exactly one of the solvers is called. Input failures propagate before any
    solver runs. invoke(solver, input_data, args) performs the call; pass a
    Stopwatch to time it.

    A part given as a plain token (e.g. RunRequest("1", ())) goes through
    parse_part, so a bad one raises InvalidPart before the input is read.
    """
    part = request.part
    if not isinstance(part, Part): part = parse_part(part)

    input_data = reader.load()

    match part:
        case Part.PT1: solver = solve_pt1
        case Part.PT2: solver = solve_pt2

    logger.debug("running part %s with %d arg(s)", part, len(request.args))
    value = invoke(solver, input_data, list(request.args))
    return Answer(part, value)

def report(answer: Answer, elapsed_ns=None, out=None) -> Answer:
    """
    Prints the answer (and the run time, if given). Returns the answer.

    The answer is rendered before anything is written; if str() fails that is
    a SolverFailure and out is left untouched.
    """
    if out is None: out = sys.stdout
    try:
        text = str(answer)
    except Exception as exc:
        raise SolverFailure(str(exc) or type(exc).__name__) from exc
    print(text, file=out)
    if elapsed_ns is not None:
        print(f"RT {elapsed_ns} ns", file=out)
    return answer

def run(solve_pt1, solve_pt2, reader, request, timed=False, out=None) -> Answer:
    """
    dispatch() followed by report().

    With timed=True the solver call is timed and an "RT <n> ns" line follows
    the answer. Nothing is printed if the run fails.
    """
    if timed:
        stopwatch = Stopwatch()
        answer = dispatch(solve_pt1, solve_pt2, reader, request, stopwatch)
        return report(answer, stopwatch.elapsed_ns, out)
    return report(dispatch(solve_pt1, solve_pt2, reader, request), out=out)
