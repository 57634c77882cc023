from . import constants, metadata, ui, utils

__all__ = [
    "constants",
    "metadata",
    "ui",
    "utils",
]
