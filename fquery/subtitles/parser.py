"""
Line parser for Advanced SubStation Alpha (ASS/SSA) subtitle files.

Only two kinds of lines matter when looking for fonts: ``Style:`` lines, which
bind a style name to a font, and ``Dialogue:`` lines, which use a style and may
switch fonts inline with ``\\fn`` override tags. Every other line is ignored.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fquery.commons.ui import prn_warn
from fquery.subtitles.aggregator import RequiredFonts

STYLE_PREFIX = "Style:"
DIALOGUE_PREFIX = "Dialogue:"
DIALOGUE_FIELDS = 10
"""Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"""
STYLE_FIELD = 3
VERTICAL_MARKER = "@"

# A font override inside an override block, up to the next tag or the end of
# the block. Blocks may hold several tags, e.g. {\b1\fnArial\fs20}.
OVERRIDE_FONT_RE = re.compile(r"\{.*?\\fn(.*?)(?=\\|\})")


@dataclass
class SubtitleScan:
    """Per-file findings, thrown away once merged"""

    style_fonts: Dict[str, str] = field(default_factory=dict)
    """Style name to font name, from ``Style:`` lines"""
    used_styles: Dict[str, None] = field(default_factory=dict)
    """Style names used by ``Dialogue:`` lines, ordered as first seen"""


def strip_vertical(font: str) -> str:
    """Drop the leading ``@`` that marks a font as vertical"""
    return font[1:] if font.startswith(VERTICAL_MARKER) else font


def parse_style_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a ``Style:`` line into its style name and font name.

    Args:
        line (str): the raw line, including the ``Style:`` prefix

    Returns:
        Optional[Tuple[str, str]]: ``(style, font)``, or None if the line is
        malformed
    """
    parts = line[len(STYLE_PREFIX) :].split(",", 2)[:2]
    if len(parts) != 2:
        prn_warn(f"Invalid ASS line: {line}")
        return None
    return parts[0].strip(), strip_vertical(parts[1].strip())


def parse_dialogue_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Parse a ``Dialogue:`` line into its style name and text.

    The text is the last field and may contain commas itself, so everything
    after the ninth comma belongs to it.

    Args:
        line (str): the raw line, including the ``Dialogue:`` prefix

    Returns:
        Optional[Tuple[str, str]]: ``(style, text)``, or None if the line is
        malformed
    """
    fields = line[len(DIALOGUE_PREFIX) :].split(",")
    if len(fields) < DIALOGUE_FIELDS - 1:
        prn_warn(f"Invalid ASS line: {line}")
        return None
    text = ",".join(fields[DIALOGUE_FIELDS - 1 :])
    return fields[STYLE_FIELD].strip(), text


def find_override_fonts(text: str) -> List[str]:
    """
    Find every font named by a ``\\fn`` override tag in dialogue text.

    Args:
        text (str): the dialogue text

    Returns:
        List[str]: font names in order of appearance, empty names left out
    """
    fonts = []
    for match in OVERRIDE_FONT_RE.finditer(text):
        font = strip_vertical(match.group(1).strip())
        if font:
            fonts.append(font)
    return fonts


def scan_subtitle(text: str, required: RequiredFonts) -> SubtitleScan:
    """
    Scan the full text of one subtitle file.

    Fonts from override tags go straight into ``required``; style bindings and
    used styles are returned so they can be merged once the file is done.
    Malformed lines are reported and skipped.

    Args:
        text (str): the file contents
        required (RequiredFonts): the batch-wide accumulator

    Returns:
        SubtitleScan: the style findings of this file
    """
    scan = SubtitleScan()
    for line in text.split("\n"):
        if line.startswith(STYLE_PREFIX):
            parsed = parse_style_line(line)
            if parsed is None:
                continue
            style, font = parsed
            scan.style_fonts[style] = font
        elif line.startswith(DIALOGUE_PREFIX):
            parsed = parse_dialogue_line(line)
            if parsed is None:
                continue
            style, dialogue = parsed
            scan.used_styles[style] = None
            for font in find_override_fonts(dialogue):
                required.add_override(font)
    return scan
