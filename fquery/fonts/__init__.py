from . import archive, detector

__all__ = [
    "archive",
    "detector",
]
