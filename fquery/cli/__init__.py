from . import application, callbacks, main, options, scan

__all__ = [
    "application",
    "callbacks",
    "main",
    "options",
    "scan",
]
