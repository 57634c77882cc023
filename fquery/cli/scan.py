import asyncio
import json
from pathlib import Path
from typing import List

import typer
from rich.markup import escape
from rich.table import Table, box
from typer_di import Depends

from fquery.cli.application import app
from fquery.cli.callbacks import raise_index, raise_no_subtitles
from fquery.cli.options import (
    INDEX_OPT,
    NO_DETECT_OPT,
    PATHS_ARG,
    OutputOptions,
)
from fquery.commons.constants import DEFAULT_INDEX, SUBTITLE_SUFFIXES
from fquery.commons.ui import console, prn_done, prn_error, prn_info, set_verbose
from fquery.commons.utils import ArchiveIndexError, pluralize
from fquery.fonts.archive import load_archive_index
from fquery.fonts.detector import HostFontDetector, PillowTextMeasurer
from fquery.pipeline import LocalSubtitleFile, resolve_batch
from fquery.report import RequiredFontView


def expand_paths(paths: List[Path]) -> List[Path]:
    """
    Expand directories into the subtitle files they contain.

    Files given directly are kept as they are, whatever their extension.

    Args:
        paths (List[Path]): files and directories from the command line

    Returns:
        List[Path]: subtitle files, in command line order
    """
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(
                sorted(
                    p
                    for p in path.rglob("*")
                    if p.is_file() and p.suffix.lower() in SUBTITLE_SUFFIXES
                )
            )
        else:
            files.append(path)
    return files


def render_table(views: List[RequiredFontView]) -> Table:
    table = Table(show_header=True, header_style="bold", box=box.ROUNDED)
    table.add_column("Font", style="bold", no_wrap=True)
    table.add_column("Installed", justify="center")
    table.add_column("Required by", style="dim")
    table.add_column("Providers")
    table.add_column("Size", justify="right", style="yellow")

    for view in views:
        mark = "[green]✔[/]" if view.installed else "[red]✘[/]"
        name = escape(view.name)
        reason = escape(view.tooltip.removeprefix("Required by "))
        if not view.providers:
            table.add_row(name, mark, reason, "[dim]not in archive[/]", "")
            continue
        providers = "\n".join(
            f"[link={p.url}][cyan]{escape(p.directory)}[/][/link]{escape(p.filename)}"
            for p in view.providers
        )
        sizes = "\n".join(p.size_mb for p in view.providers)
        table.add_row(name, mark, reason, providers, sizes)
    return table


@app.command(
    name="scan",
    short_help="List fonts required by subtitle files. Alias: s",
    no_args_is_help=True,
)
@app.command(
    name="s", short_help="List fonts required by subtitle files", hidden=True, no_args_is_help=True
)
def scan(
    paths: PATHS_ARG,
    index: INDEX_OPT = DEFAULT_INDEX,
    no_detect: NO_DETECT_OPT = False,
    output: OutputOptions = Depends(OutputOptions),
) -> None:
    """Find the fonts required by ASS/SSA subtitles and where to download them"""

    set_verbose(output.verbose)
    files = expand_paths(paths)
    try:
        raise_index(index)
        raise_no_subtitles(files)
        archive = load_archive_index(index)
    except (FileNotFoundError, ArchiveIndexError) as e:
        prn_error(str(e))
        raise typer.Exit(1)

    prn_info(f"Scanning {pluralize(len(files), 'subtitle file')}")
    detector = None if no_detect else HostFontDetector(PillowTextMeasurer())
    sources = [LocalSubtitleFile(path) for path in files]
    views = asyncio.run(resolve_batch(sources, archive, detector))

    if output.missing_only:
        views = [view for view in views if not view.installed]

    if output.as_json:
        typer.echo(
            json.dumps(
                [view.model_dump() for view in views], ensure_ascii=False, indent=2
            )
        )
        return

    if not views:
        prn_done("No required fonts")
        return
    console.print(render_table(views))
    missing = sum(1 for view in views if not view.installed)
    prn_done(
        f"{pluralize(len(views), 'required font')}, {missing} not installed"
    )
