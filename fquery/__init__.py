from . import commons, fonts, pipeline, report, subtitles

__all__ = [
    "commons",
    "fonts",
    "pipeline",
    "report",
    "subtitles",
]
