"""Heuristic detection of fonts installed on the host.

A font counts as installed when a probe string measured with it renders at a
different width than the same string measured with the fallback font. Two
fonts that happen to give the probe the same width can't be told apart, so the
answer is an estimate.
"""

from pathlib import Path
from typing import Callable, Dict, Iterable, NamedTuple, Optional, Protocol, Sequence

from find_system_fonts_filename import get_system_fonts_filename
from fontTools import ttLib
from PIL import ImageFont

from fquery.commons.constants import PROBE_SIZE, PROBE_TEXT, SENTINEL_FAMILY
from fquery.commons.ui import prn_dbg

# Family, full name and PostScript name, the names ASS renderers match against
NAME_IDS = (1, 4, 6)
COLLECTION_SUFFIXES = (".ttc", ".otc")


class TextMeasurer(Protocol):
    """Measures the rendered width of text under a font stack"""

    def measure(self, font_stack: Sequence[str], probe: str) -> float: ...


class FontFile(NamedTuple):
    path: Path
    index: int = 0
    """Face index inside a font collection"""


def _face_names(font: ttLib.TTFont) -> Iterable[str]:
    name_table = font.get("name")
    if not name_table:
        return
    for record in name_table.names:  # type: ignore
        if record.nameID not in NAME_IDS:
            continue
        try:
            name = record.toUnicode().strip()
        except UnicodeDecodeError:
            continue
        if name:
            yield name


def build_system_fonts_cache(
    system_fonts_filename: Callable[[], Iterable[str]] = get_system_fonts_filename,
) -> Dict[str, FontFile]:
    """Build a cache mapping font names to their files.

    Args:
        system_fonts_filename: Function that returns paths to system fonts.

    Returns:
        Dictionary mapping lowercase font names to font files. When several
        files share a name, the first one found wins.
    """
    font_cache: Dict[str, FontFile] = {}

    for font_path_str in system_fonts_filename():
        font_path = Path(font_path_str)
        if not font_path.exists():
            continue

        try:
            if font_path.suffix.lower() in COLLECTION_SUFFIXES:
                collection = ttLib.TTCollection(font_path, lazy=True)
                faces = list(enumerate(collection.fonts))
            else:
                faces = [(0, ttLib.TTFont(font_path, lazy=True))]
            for index, font in faces:
                for name in _face_names(font):
                    font_cache.setdefault(name.lower(), FontFile(font_path, index))
                font.close()
        except Exception as e:
            # Unreadable or unsupported font file
            prn_dbg(f"Skipping font file '{font_path}': {e}")
            continue

    prn_dbg(f"Indexed {len(font_cache)} installed font names")
    return font_cache


class PillowTextMeasurer:
    """Measures text with Pillow, using the fonts installed on the host.

    A font stack resolves like a CSS ``font-family`` list: the first family
    that is installed is used, and Pillow's built-in font stands in when none
    is.
    """

    def __init__(
        self,
        size: int = PROBE_SIZE,
        font_files: Optional[Dict[str, FontFile]] = None,
    ):
        self.size = size
        self._font_files = font_files
        self._loaded: Dict[Optional[FontFile], ImageFont.FreeTypeFont] = {}

    @property
    def font_files(self) -> Dict[str, FontFile]:
        if self._font_files is None:
            self._font_files = build_system_fonts_cache()
        return self._font_files

    def _load(self, font_file: Optional[FontFile]):
        if font_file not in self._loaded:
            if font_file is None:
                font = ImageFont.load_default(size=self.size)
            else:
                font = ImageFont.truetype(
                    str(font_file.path), self.size, index=font_file.index
                )
            self._loaded[font_file] = font
        return self._loaded[font_file]

    def resolve(self, font_stack: Sequence[str]):
        for family in font_stack:
            font_file = self.font_files.get(family.lower())
            if font_file is None:
                continue
            try:
                return self._load(font_file)
            except OSError as e:
                prn_dbg(f"Failed to load '{family}' from {font_file.path}: {e}")
        return self._load(None)

    def measure(self, font_stack: Sequence[str], probe: str) -> float:
        return float(self.resolve(font_stack).getlength(probe))


class HostFontDetector:
    """Tells whether a font resolves to something other than the fallback"""

    def __init__(
        self,
        measurer: TextMeasurer,
        probe: str = PROBE_TEXT,
        sentinel: str = SENTINEL_FAMILY,
    ):
        self.measurer = measurer
        self.probe = probe
        self.sentinel = sentinel
        self.baseline = measurer.measure([sentinel], probe)

    def is_installed(self, name: str) -> bool:
        """
        Estimate whether a font is available on this host.

        Args:
            name (str): the font name

        Returns:
            bool: True if the probe renders at a different width than with
            the fallback font
        """
        width = self.measurer.measure([name, self.sentinel], self.probe)
        return width != self.baseline
