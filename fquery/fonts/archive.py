"""Font archive index lookup.

The index is a pre-built JSON file of the shape::

    {
        "fonts": [{"path": "dir/sub/Font.ttf", "size": 123456}, ...],
        "name_to_idxes": {"font name": [0, 4], ...}
    }

``name_to_idxes`` is keyed by lowercase font name and points into ``fonts``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from fquery.commons.constants import ARCHIVE_BROWSE_URI
from fquery.commons.ui import prn_dbg
from fquery.commons.utils import ArchiveIndexError, format_megabytes


class ArchiveRecord(BaseModel):
    """A font file in the archive"""

    model_config = ConfigDict(frozen=True)

    path: str
    """Path of the file inside the archive, ``/`` separated"""
    size: int
    """File size in bytes"""


class Provider(BaseModel):
    """A downloadable source for a required font"""

    model_config = ConfigDict(frozen=True)

    directory: str
    """Archive directory, with its trailing separator"""
    filename: str
    size: int

    @classmethod
    def from_record(cls, record: ArchiveRecord) -> "Provider":
        directory, sep, filename = record.path.rpartition("/")
        return cls(directory=directory + sep, filename=filename, size=record.size)

    @property
    def url(self) -> str:
        """Link to the directory listing on the archive's web page"""
        return ARCHIVE_BROWSE_URI + self.directory

    @property
    def size_mb(self) -> str:
        return format_megabytes(self.size)


class ArchiveIndex(BaseModel):
    """Immutable font name to archive file index"""

    model_config = ConfigDict(frozen=True)

    fonts: List[ArchiveRecord]
    name_to_idxes: Dict[str, List[int]]

    @model_validator(mode="after")
    def _check_indexes(self) -> "ArchiveIndex":
        total = len(self.fonts)
        for name, idxes in self.name_to_idxes.items():
            for idx in idxes:
                if not 0 <= idx < total:
                    raise ValueError(
                        f"Index {idx} of '{name}' is out of range ({total} fonts)"
                    )
        return self

    def lookup(self, name: str) -> List[Provider]:
        """
        Find the archive files providing a font.

        Args:
            name (str): font name, matched case-insensitively

        Returns:
            List[Provider]: providers ordered by ascending size, ties keep the
            index order. Empty if the font is not in the archive.
        """
        idxes = self.name_to_idxes.get(name.lower(), [])
        providers = [Provider.from_record(self.fonts[idx]) for idx in idxes]
        return sorted(providers, key=lambda provider: provider.size)


@lru_cache(maxsize=None)
def load_archive_index(path: Path) -> ArchiveIndex:
    """
    Load the archive index from a JSON file. Each path is read only once per
    process.

    Args:
        path (Path): path to the index file

    Returns:
        ArchiveIndex: the parsed index

    Raises:
        ArchiveIndexError: the file can't be read or is not a valid index
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise ArchiveIndexError(f"Failed to read archive index '{path}': {e}") from e
    try:
        index = ArchiveIndex.model_validate_json(raw)
    except ValidationError as e:
        raise ArchiveIndexError(f"Invalid archive index '{path}': {e}") from e
    prn_dbg(
        f"Loaded archive index with {len(index.fonts)} files "
        f"and {len(index.name_to_idxes)} names"
    )
    return index
