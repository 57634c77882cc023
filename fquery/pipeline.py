"""
Batch orchestration: read subtitle files in order, collect their font
requirements, then resolve every font against the host and the archive.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from fquery.commons.ui import prn_dbg
from fquery.fonts.archive import ArchiveIndex
from fquery.fonts.detector import HostFontDetector
from fquery.report import RequiredFontView, build_views
from fquery.subtitles.aggregator import RequiredFonts, merge_scan
from fquery.subtitles.parser import scan_subtitle


class SubtitleSource(Protocol):
    """A subtitle file handed over by the selection layer"""

    name: str

    async def read_text(self) -> str: ...


class LocalSubtitleFile:
    """Subtitle file on the local file system"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.name = self.path.name

    def __repr__(self) -> str:
        return f"LocalSubtitleFile({str(self.path)!r})"

    async def read_text(self) -> str:
        # utf-8-sig drops the BOM many subtitle editors write, undecodable
        # bytes become U+FFFD
        read = partial(self.path.read_text, encoding="utf-8-sig", errors="replace")
        return await asyncio.to_thread(read)


async def collect_required_fonts(sources: Sequence[SubtitleSource]) -> RequiredFonts:
    """
    Collect the fonts required by a batch of subtitle files.

    Files are processed one after another in the given order; reading a file
    is the only point where the batch waits.

    Args:
        sources (Sequence[SubtitleSource]): the files of the batch

    Returns:
        RequiredFonts: requirements of the whole batch
    """
    required = RequiredFonts()
    for source in sources:
        text = await source.read_text()
        prn_dbg(f"Scanning {source.name}")
        scan = scan_subtitle(text, required)
        merge_scan(scan, required)
    return required


async def resolve_batch(
    sources: Sequence[SubtitleSource],
    index: ArchiveIndex,
    detector: Optional[HostFontDetector] = None,
) -> List[RequiredFontView]:
    """Run a whole batch and return the displayed font list"""
    required = await collect_required_fonts(sources)
    return build_views(required, index, detector)


class FontQuery:
    """Keeps the font list of the latest file selection.

    Every call to :meth:`run` is a new batch with fresh state. A batch that
    finishes after a newer one has already published is dropped, so the list
    always belongs to the most recent selection that completed.
    """

    def __init__(
        self,
        index: ArchiveIndex,
        detector: Optional[HostFontDetector] = None,
        on_publish: Optional[Callable[[List[RequiredFontView]], None]] = None,
    ):
        self.index = index
        self.detector = detector
        self.on_publish = on_publish
        self.views: List[RequiredFontView] = []
        self._started = 0
        self._published = 0

    async def run(self, sources: Sequence[SubtitleSource]) -> List[RequiredFontView]:
        """
        Process a new file selection.

        Args:
            sources (Sequence[SubtitleSource]): the selected files

        Returns:
            List[RequiredFontView]: the font list of this batch, whether or
            not it got published
        """
        self._started += 1
        generation = self._started
        views = await resolve_batch(sources, self.index, self.detector)
        if generation < self._published:
            prn_dbg(f"Dropping results of superseded batch #{generation}")
            return views
        self._published = generation
        self.views = views
        if self.on_publish:
            self.on_publish(views)
        return views
