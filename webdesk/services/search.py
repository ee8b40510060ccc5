"""
Search expressions for directory listings.

Matchers are tried in order and the first whose expression syntax fits
decides whether a file is listed:

    all          every file
    txt,png      files ending in one of the listed extensions
    *txt         files named word.txt
    *name.txt    files ending in name.txt
    @part        files whose name contains part

Any other expression lists no files. Folders are listed only for the
expression `folders`.
"""

import re
from collections.abc import Callable
from typing import NamedTuple

FOLDERS = "folders"

_STAR_EXTENSION = re.compile(r"^\*\w+$", re.ASCII)
_STAR_PATTERN = re.compile(r"^\*\w+\.\w+$", re.ASCII)
_AT_SUBSTRING = re.compile(r"^@\w+$", re.ASCII)


class Matcher(NamedTuple):
    """A search rule: when `applies` to the expression, `matches` filters names."""

    name: str
    applies: Callable[[str], bool]
    matches: Callable[[str, str], bool]


def _match_extension_list(search: str, name: str) -> bool:
    return any(name.endswith("." + ext) for ext in search.split(","))


def _match_star_extension(search: str, name: str) -> bool:
    return re.search(r"\w+\." + re.escape(search[1:]) + "$", name, re.ASCII) is not None


def _match_star_pattern(search: str, name: str) -> bool:
    return re.search(search[1:] + "$", name, re.ASCII) is not None


MATCHERS: tuple[Matcher, ...] = (
    Matcher("all", lambda search: search == "all", lambda search, name: True),
    Matcher("extension-list", lambda search: "," in search, _match_extension_list),
    Matcher("star-extension", lambda search: bool(_STAR_EXTENSION.match(search)), _match_star_extension),
    Matcher("star-pattern", lambda search: bool(_STAR_PATTERN.match(search)), _match_star_pattern),
    Matcher("substring", lambda search: bool(_AT_SUBSTRING.match(search)), lambda search, name: search[1:] in name),
)


def select_matcher(search: str) -> Matcher | None:
    """Return the first matcher whose syntax fits the expression."""
    for matcher in MATCHERS:
        if matcher.applies(search):
            return matcher
    return None


def include_file(search: str, name: str) -> bool:
    """Whether a non-directory entry is listed for the expression."""
    matcher = select_matcher(search)
    return matcher is not None and matcher.matches(search, name)


def include_folder(search: str, name: str) -> bool:
    """Whether a directory entry is listed for the expression."""
    return search == FOLDERS and name != "." and ".." not in name
