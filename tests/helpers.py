import asyncio
from pathlib import Path
from typing import Dict, Optional, Sequence

from fquery.fonts.archive import ArchiveIndex

SAMPLE_ASS = "\n".join(
    [
        "[Script Info]",
        "ScriptType: v4.00+",
        "",
        "[V4+ Styles]",
        "Format: Name, Fontname, Fontsize, PrimaryColour, Bold, Italic",
        "Style: Default,Arial,20,&H00FFFFFF,0,0",
        "Style: Sign,@MS Gothic,30,&H00FFFFFF,-1,0",
        "Style: Unused,Impact,20,&H00FFFFFF,0,0",
        "",
        "[Events]",
        "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text",
        r"Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Hello, world",
        r"Dialogue: 0,0:00:03.00,0:00:04.00,Sign,,0,0,0,,{\pos(10,10)\fnComic Sans MS\b1}Sale",
        r"Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,{\fn@Noto Sans JP}縦書き",
    ]
)


def make_index(fonts: Sequence[tuple], names: Dict[str, list]) -> ArchiveIndex:
    return ArchiveIndex(
        fonts=[{"path": path, "size": size} for path, size in fonts],
        name_to_idxes=names,
    )


class FakeMeasurer:
    """Returns a fixed width per font, the first known family of a stack wins"""

    def __init__(self, widths: Dict[str, float], fallback: float = 10.0):
        self.widths = widths
        self.fallback = fallback
        self.calls = []

    def measure(self, font_stack: Sequence[str], probe: str) -> float:
        self.calls.append((tuple(font_stack), probe))
        for family in font_stack:
            if family in self.widths:
                return self.widths[family]
        return self.fallback


class MemorySource:
    """Subtitle source backed by a string"""

    def __init__(self, name: str, text: str, gate: Optional[asyncio.Event] = None):
        self.name = name
        self.text = text
        self.gate = gate

    async def read_text(self) -> str:
        if self.gate is not None:
            await self.gate.wait()
        return self.text


def build_test_font(path: Path, family: str, advance: int = 1500) -> Path:
    """Write a tiny TrueType font where every glyph is ``advance`` units wide"""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({ord("A"): "A"})
    fb.setupGlyf({".notdef": glyph, "A": glyph})
    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics(
        {name: (advance, glyph_table[name].xMin) for name in (".notdef", "A")}
    )
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path
