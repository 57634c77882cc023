from typing import Optional, Union


class ArchiveIndexError(Exception):
    """Exception raised when the font archive index can't be loaded."""


def pluralize(n: Union[int, float], word: str, plural: Optional[str] = None) -> str:
    """
    Pluralize a word based on a count.

    Args:
        n (int | float): the count
        word (str): the word to pluralize
        plural (Optional[str], optional): the plural form of the word

    Returns:
        str: the pluralized word
    """
    if n == 1:
        return f"{n} {word}"
    if plural:
        return f"{n} {plural}"
    if word.endswith("y"):
        return f"{n} {word[:-1]}ies"
    elif word.endswith("s"):
        return f"{n} {word}es"
    return f"{n} {word}s"


def format_megabytes(size: int) -> str:
    """
    Format a byte count as megabytes with two decimals, e.g. ``12.34MB``.

    Args:
        size (int): size in bytes

    Returns:
        str: the formatted size
    """
    return f"{size / 1024 / 1024:.2f}MB"
