"""
Command line entry point for solution scripts.

A solution module typically ends with:

if __name__ == "__main__":
    run_solutions(solve_pt1, solve_pt2)

and is then driven by esb as `python solution.py --part 1 [--args a b c]`, with
the puzzle input on stdin.
"""

import argparse
import logging

from pydantic import ValidationError

from esb_fireplace.config import ENV_PREFIX, load_settings
from esb_fireplace.errors import InvalidPart, MissingPart
from esb_fireplace.inputs import StdinReader
from esb_fireplace.logging_utils import configure_logging
from esb_fireplace.parts import RunRequest
from esb_fireplace.runner import run

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "Script your way to rescue Christmas as part of the ElfScript Brigade "
    "team. Runs one part of an Advent of Code solution on the input given on "
    "stdin. See https://github.com/luxedo/esb for more information.")

def build_parser():
    # --part is validated by RunRequest.from_namespace so that a missing or bad
    # value is reported as MissingPart / InvalidPart
    arg_parser = argparse.ArgumentParser(prog="esb_fireplace", description=DESCRIPTION)
    arg_parser.add_argument("--part", "-p", metavar="{1,2}",
                            help="Run solution part 1 or part 2")
    arg_parser.add_argument("--args", "-a", nargs="*", default=[],
                            help="Additional arguments for running the solutions")
    return arg_parser

def run_solutions(solve_pt1, solve_pt2, argv=None, reader=None, out=None, settings=None):
    """
    Basic esb main: parses flags, reads stdin, runs one part, prints the answer.

    Bad usage (missing / invalid --part, malformed ESB_FIREPLACE_* settings)
    exits via the argument parser's usual error path; other failures are raised
    as FireplaceError. Returns the Answer.
    """
    arg_parser = build_parser()
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as err:
            arg_parser.error(_describe_settings_error(err))
    configure_logging(settings.log_level)

    ns = arg_parser.parse_args(argv)
    try:
        request = RunRequest.from_namespace(ns)
    except (MissingPart, InvalidPart) as err:
        arg_parser.error(str(err))

    if reader is None: reader = StdinReader()
    logger.info("running part %s (timed=%s)", request.part, settings.timed)
    return run(solve_pt1, solve_pt2, reader, request, timed=settings.timed, out=out)

def _describe_settings_error(err):
    problems = []
    for e in err.errors():
        name = ENV_PREFIX + "_".join(str(loc) for loc in e["loc"]).upper()
        problems.append(f"{name}: {e['msg']}")
    return "invalid setting " + "; ".join(problems)
