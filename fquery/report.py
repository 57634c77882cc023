"""
Presentation of required fonts: tooltips and the final ordered font list
"""

import locale
import unicodedata
from typing import List, Optional

from pydantic import BaseModel

from fquery.fonts.archive import ArchiveIndex, Provider
from fquery.fonts.detector import HostFontDetector
from fquery.subtitles.aggregator import RequiredFontEntry, RequiredFonts


class RequiredFontView(BaseModel):
    """A required font, ready to be displayed"""

    name: str
    tooltip: str
    """Explains which styles, or override tags, need the font"""
    installed: bool
    """Best guess of whether the font is installed on this host"""
    providers: List[Provider]
    """Archive files providing the font, smallest first"""


def collation_key(name: str) -> tuple:
    """
    Sort key for font names: accents and case only break ties, the rest
    follows the collation rules of the current locale.

    Args:
        name (str): the font name

    Returns:
        tuple: key comparing like a human-readable dictionary order
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return locale.strxfrm(base.casefold()), locale.strxfrm(name)


def build_tooltip(entry: RequiredFontEntry) -> str:
    """
    Describe why a font is required.

    Args:
        entry (RequiredFontEntry): the font's requirement entry

    Returns:
        str: e.g. ``Required by Default, Sign and override tags``
    """
    tooltip = f"Required by {', '.join(entry.reverse_deps)}"
    if entry.override_tag:
        if entry.reverse_deps:
            tooltip += " and "
        tooltip += "override tags"
    return tooltip


def build_views(
    required: RequiredFonts,
    index: ArchiveIndex,
    detector: Optional[HostFontDetector] = None,
) -> List[RequiredFontView]:
    """
    Turn the requirements of a finished batch into the displayed font list.

    Args:
        required (RequiredFonts): requirements of the whole batch
        index (ArchiveIndex): the archive index to find providers in
        detector (Optional[HostFontDetector], optional): host font detector,
            every font is reported as not installed without one

    Returns:
        List[RequiredFontView]: one view per font, sorted by name with the
        collation rules of the current locale
    """
    views = [
        RequiredFontView(
            name=name,
            tooltip=build_tooltip(entry),
            installed=detector.is_installed(name) if detector else False,
            providers=index.lookup(name),
        )
        for name, entry in required.items()
    ]
    return sorted(views, key=lambda view: collation_key(view.name))
