#!/usr/bin/env python3
"""
mdhtml - directive-aware Markdown to HTML compiler

Compiles a tree of Markdown files, stitched together with line directives,
into one standalone HTML document per root file.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directives (must start at column 0):
    :include:<path>          Inline another Markdown file
    :include*:<dir>|<regex>  Inline every matching .md file in <dir>, in natural order
    :css:<path>              Link a stylesheet (duplicates are dropped)
    :title:<text>            Set the page title (the root document wins)
    :id:/:class:/:style:     Attributes for the next heading (--variant headings)

Usage:
    mdhtml inputdir/ outputdir/ --inputFile guide.md

    Each input file is converted to outputdir/<same relative path>.html.
    Pass the same directory twice to write the HTML next to its source.

Examples:
    # Convert in place
    mdhtml docs/ docs/ --inputFile guide.md reference.md

    # Honour heading attribute directives
    mdhtml docs/ out/ --inputFile guide.md --variant headings

    # Verbose output
    mdhtml docs/ out/ --inputFile guide.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Tuple

from chris_plugin import chris_plugin
from .config import appsettings, AppSettings
from .lib import Converter, MdhtmlError, __version__, LOG, WARN, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
               _ _     _             _
   _ __ ___   __| | |__ | |_ _ __ ___ | |
  | '_ ` _ \ / _` | '_ \| __| '_ ` _ \| |
  | | | | | | (_| | | | | |_| | | | | | |
  |_| |_| |_|\__,_|_| |_|\__|_| |_| |_|_|

  Directive-aware Markdown to HTML compiler
"""

# Define CLI arguments
parser = ArgumentParser(
    description="mdhtml - compile directive-annotated Markdown into standalone HTML",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile",
    required=True,
    nargs="+",
    type=str,
    help="Markdown (.md) file(s) to convert (relative to inputdir)",
)

parser.add_argument(
    "--variant",
    default=None,
    choices=["markdown", "headings"],
    help="Conversion variant (defaults to MDHTML_VARIANT or 'markdown')",
)

parser.add_argument(
    "--maxLineSize",
    default=None,
    type=int,
    help="Maximum size in bytes of a single source line",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate arguments and work out source/destination pairs.

    Arguments without a .md extension are skipped with a warning.

    Returns:
        ProgramState with added fields:
            - sourceFiles: List of (source, destination) Path pairs
            - envOK: True if there is anything to convert

    Exits:
        1 if inputdir does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if not state.inputdir or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    pairs: List[Tuple[Path, Path]] = []
    for name in state.inputFile:
        if Path(name).suffix != ".md":
            WARN(f"skipping non-markdown file: {name}")
            continue
        source = state.inputdir / name
        destination = state.outputdir / appsettings.outputName_make(name)
        pairs.append((source, destination))
        LOG(f"{source} -> {destination}", level=2)

    state.sourceFiles = pairs
    state.envOK = True
    return state


def files_convert(inputstate: ProgramState) -> ProgramState:
    """
    Convert every source file, stopping at the first failure.

    Returns:
        ProgramState with added field:
            - convertResults: List of per-file result dicts

    Exits:
        1 on any read, directive or render error
    """
    state = inputstate.copy()

    settings = appsettings
    if state.maxLineSize is not None:
        try:
            settings = AppSettings(max_line_size=state.maxLineSize)
        except ValueError as e:
            print(f"Error: invalid --maxLineSize: {e}", file=sys.stderr)
            sys.exit(1)

    converter = Converter(variant=state.variant, settings=settings)

    results = []
    for source, destination in state.sourceFiles:
        LOG(f"Converting {source}...", level=1)
        try:
            results.append(converter.file_convert(source, destination))
        except MdhtmlError as e:
            print(f"Error: {e}", file=sys.stderr)
            if state.verbosity >= 3 or settings.debug_mode:
                import traceback

                traceback.print_exc()
            sys.exit(1)

    state.convertResults = results
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display conversion results.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if state.convertResults is None:
        print("Error: Conversion failed", file=sys.stderr)
        sys.exit(1)

    LOG(f"✓ Converted {len(state.convertResults)} file(s)", level=1)
    for result in state.convertResults:
        LOG(f"  Output: {result['output_file']}", level=1)
        LOG(f"  Title: {result['title'] or '(none)'}  Stylesheets: {result['css_count']}", level=2)
    return state


@chris_plugin(
    parser=parser,
    title="mdhtml - directive-aware Markdown to HTML compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - convert Markdown sources to standalone HTML.

    Orchestrates the full pipeline:
        1. env_check: Validate inputs, pick source/destination pairs
        2. files_convert: Resolve, render and write each file
        3. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, files_convert, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
