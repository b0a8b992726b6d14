#!/usr/bin/env python3
"""
clansi - ANSI escape markup for terminal output

Command line front end for the clansi markup library.

Usage:
    clansi styles
    clansi doc json.dumps
    clansi markup "this is " :red "red" :reset ", while this is " :bright :green "bold green"

Markup tokens starting with a single colon are directives or style names;
start a token with two colons to print a literal leading colon.

Examples:
    # Show every directive and style in itself
    clansi styles

    # Same, with a custom style sheet merged in
    clansi --stylesFile mystyles.yaml styles

    # Plain output, e.g. when piping into a file
    clansi --noAnsi doc collections.OrderedDict

    # Verbose output
    clansi -vv markup :protected "ok"
"""

import sys
from contextvars import copy_context
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from contextlib import ExitStack
from typing import List, Optional

from .config import appsettings
from .lib import (
    __version__,
    LOG,
    logger_configure,
    state_connectToLogger,
    clansify,
    doc_render,
    doc_resolve,
    styleTestPage_render,
    without_ansi,
    StyleSheet,
    StyleSheetError,
    DocLookupError,
)
from .models import ProgramState, pipeline, item_parse


# Define CLI arguments
parser = ArgumentParser(
    prog="clansi",
    description="clansi - ANSI escape markup for terminal output",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--noAnsi",
    action="store_true",
    default=False,
    help="Print without ANSI escape codes",
)

parser.add_argument(
    "--stylesFile",
    default=None,
    type=str,
    help="YAML style sheet merged into the style table (default: CLANSI_STYLES_FILE)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

subparsers = parser.add_subparsers(dest="command", required=True)

subparsers.add_parser("styles", help="List all directives and styles, each shown in itself")

doc_parser = subparsers.add_parser("doc", help="Print colorized documentation for a Python object")
doc_parser.add_argument("name", type=str, help="Dotted name, e.g. json.dumps")

markup_parser = subparsers.add_parser("markup", help="Compose markup tokens into styled text")
markup_parser.add_argument("items", nargs="*", help="Text or :directive tokens")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Resolve the style sheet path.

    Returns:
        ProgramState with envOK set and stylesFile defaulted from settings
    """
    state = inputstate.copy()

    LOG(f"Command: {state.command}", level=2)

    if not state.stylesFile and appsettings.styles_file:
        state.stylesFile = appsettings.styles_file
        LOG(f"Style sheet from settings: {state.stylesFile}", level=2)

    state.envOK = True
    return state


def styles_load(inputstate: ProgramState) -> ProgramState:
    """
    Load the style sheet, if any.

    The sheet is only bound while command_run() renders, so nothing of it
    outlives the run.

    Returns:
        ProgramState with styleSheet and stylesLoaded set, or exitCode 1 if
        the sheet cannot be loaded
    """
    state = inputstate.copy()

    if not state.stylesFile:
        return state

    try:
        state.styleSheet = StyleSheet(state.stylesFile)
    except StyleSheetError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.exitCode = 1
        return state

    state.stylesLoaded = len(state.styleSheet.styles)
    LOG(f"Loaded {state.stylesLoaded} styles", level=2)
    return state


def command_run(inputstate: ProgramState) -> ProgramState:
    """
    Run the subcommand and print its output.

    Skipped when an earlier stage failed.

    Returns:
        ProgramState with output set, or exitCode 1 if a doc lookup fails
    """
    state = inputstate.copy()
    if state.exitCode:
        return state

    with ExitStack() as scope:
        if state.noAnsi:
            scope.enter_context(without_ansi())
        if state.styleSheet is not None:
            scope.enter_context(state.styleSheet.bind())

        if state.command == "styles":
            state.output = styleTestPage_render()
        elif state.command == "doc":
            try:
                state.output = doc_render(doc_resolve(state.name))
            except DocLookupError as e:
                print(f"Error: {e}", file=sys.stderr)
                state.exitCode = 1
                return state
        else:
            tokens = [item_parse(token) for token in state.items]
            LOG(f"Composing {len(tokens)} markup items", level=3)
            state.output = clansify(*tokens)

    print(state.output)
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Orchestrates the CLI pipeline:
        1. env_check: Resolve options
        2. styles_load: Load the style sheet
        3. command_run: Produce and print the output

    Returns:
        Process exit code (0 on success, 1 on errors)
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    logger_configure()

    # Logger binding stays local to this run
    return copy_context().run(run, state)


def run(state: ProgramState) -> int:
    """Run the pipeline for an already parsed state"""
    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    final_state = pipeline(state, env_check, styles_load, command_run)
    return final_state.exitCode


if __name__ == "__main__":
    sys.exit(main())
