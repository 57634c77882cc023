from dataclasses import dataclass
from pathlib import Path
from typing import List

import typer
from typing_extensions import Annotated

PATHS_ARG = Annotated[
    List[Path],
    typer.Argument(
        ...,
        help="Subtitle files, or directories to search for .ass/.ssa files",
        show_default=False,
        exists=True,
        resolve_path=True,
        rich_help_panel="Input",
    ),
]
"""Subtitle files or directories to scan"""
INDEX_OPT = Annotated[
    Path,
    typer.Option(
        "--index",
        "--index-file",
        "-i",
        help="Path to the font archive index (fonts.json). Can also be set with FQUERY_INDEX",
        rich_help_panel="Input",
        resolve_path=True,
    ),
]
"""Path to the font archive index"""
JSON_OPT = Annotated[
    bool,
    typer.Option(
        "--json",
        "-j",
        help="Print the required fonts as JSON instead of a table",
        rich_help_panel="Output",
    ),
]
"""Flag to print JSON"""
MISSING_OPT = Annotated[
    bool,
    typer.Option(
        "--missing-only",
        "-m",
        help="Only list fonts that don't seem to be installed",
        rich_help_panel="Output",
    ),
]
"""Flag to hide installed fonts"""
NO_DETECT_OPT = Annotated[
    bool,
    typer.Option(
        "--no-detect",
        "-D",
        help="Skip checking which fonts are installed on this system, every font is reported as missing",
        rich_help_panel="Detection",
    ),
]
"""Flag to skip host font detection"""
VERBOSE_OPT = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
        rich_help_panel="Output",
    ),
]
"""Flag to enable verbose output"""


@dataclass
class OutputOptions:
    """Output options dependency"""

    as_json: JSON_OPT = False
    missing_only: MISSING_OPT = False
    verbose: VERBOSE_OPT = False
