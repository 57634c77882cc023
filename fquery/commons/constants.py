import os
from pathlib import Path

import platformdirs

BASE_DIR = Path(platformdirs.user_data_dir("fquery"))
DEFAULT_INDEX = Path(os.getenv("FQUERY_INDEX", BASE_DIR / "fonts.json"))
"""Pre-built font archive index, overridable with the FQUERY_INDEX variable"""
ARCHIVE_BROWSE_URI = "https://pan.acgrip.com/?dir=超级字体整合包 XZ/完整包/"
"""Web listing of the font archive, providers link to their directory in it"""
SUBTITLE_SUFFIXES = (".ass", ".ssa")

# Host font probing. The sentinel is a made up family that no system ships,
# so measuring with it always lands on the fallback font.
PROBE_TEXT = "AaWm01"
PROBE_SIZE = 16
SENTINEL_FAMILY = "__FQUERY_FALLBACK__"
