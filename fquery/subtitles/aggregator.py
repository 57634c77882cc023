"""
Cross-file font requirements, merged monotonically over one batch run
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from fquery.commons.ui import prn_dbg

if TYPE_CHECKING:
    from fquery.subtitles.parser import SubtitleScan


@dataclass
class RequiredFontEntry:
    """Why a font is required"""

    reverse_deps: List[str] = field(default_factory=list)
    """Styles whose binding pulled in the font, in first-seen order"""
    override_tag: bool = False
    """Whether a ``\\fn`` override tag referenced the font directly"""


class RequiredFonts:
    """Required fonts of a batch, keyed by font name as written in the files.

    Entries only ever grow: styles are unioned into ``reverse_deps`` and
    ``override_tag`` never goes back to False once set.
    """

    def __init__(self):
        self._entries: Dict[str, RequiredFontEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, font: str) -> bool:
        return font in self._entries

    def __getitem__(self, font: str) -> RequiredFontEntry:
        return self._entries[font]

    def items(self) -> Iterator[Tuple[str, RequiredFontEntry]]:
        return iter(self._entries.items())

    def _entry(self, font: str) -> RequiredFontEntry:
        entry = self._entries.get(font)
        if entry is None:
            entry = self._entries[font] = RequiredFontEntry()
            prn_dbg(f"Found new font: '{font}'")
        return entry

    def add_override(self, font: str) -> None:
        """Mark a font as referenced by an override tag"""
        self._entry(font).override_tag = True

    def add_style(self, font: str, style: str) -> None:
        """Record that ``style`` requires ``font``"""
        entry = self._entry(font)
        if style not in entry.reverse_deps:
            entry.reverse_deps.append(style)


def merge_scan(scan: "SubtitleScan", required: RequiredFonts) -> None:
    """Merge the style fonts of one scanned file into the batch requirements.

    Only styles that dialogue lines actually use count. A used style without
    a ``Style:`` definition in the same file is skipped.

    Args:
        scan: the finished scan of a single file
        required: the batch-wide accumulator, updated in place
    """
    for style in scan.used_styles:
        font = scan.style_fonts.get(style)
        if font:
            required.add_style(font, style)
