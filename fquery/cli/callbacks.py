from pathlib import Path
from typing import List


def raise_index(path: Path):
    if not path.is_file():
        raise FileNotFoundError(
            f"Font archive index not found at {path}. "
            "Please download it or specify the path with --index."
        )


def raise_no_subtitles(paths: List[Path]):
    if not paths:
        raise FileNotFoundError("No ASS/SSA subtitle files found in the given paths.")
