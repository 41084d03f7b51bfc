"""Tag classification for the node parser.

Each child element met while parsing a data section is either recorded as a
field or expanded inline:

- CITATION_EXPANSION:        the field label is exactly "citation"; the
                             citation's sub-fields land in the record.
- SUBFIELD_GROUP_EXPANSION:  repeated sub-field groups such as DAT01, DAT02,
                             IDE01 (two to four capitals, then ``0``, then a
                             digit), the ``CIT`` group, and any tag starting
                             with "citation".
- LEAF_FIELD:                everything else.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

# Two to four capitals, a literal 0, one digit, then anything (DAT01, IDE02x)
_SUBFIELD_GROUP = re.compile(r"[A-Z]{2,4}0[0-9].*", re.DOTALL)

# Java-style \s: space, tab, newline, vertical tab, form feed, carriage return
_TRAILING_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]+\Z")

CITATION_LABEL = "citation"


class TagKind(StrEnum):
    """What the node parser does with a child element."""

    LEAF_FIELD = auto()
    CITATION_EXPANSION = auto()
    SUBFIELD_GROUP_EXPANSION = auto()


def classify_tag(tag: str, label: str) -> TagKind:
    """Classify a child element by its raw tag and its resolved label.

    Args:
        tag:   Raw element tag name.
        label: The tag's resolved field label.

    Returns:
        The TagKind deciding between recursion and recording a field.
    """
    if label == CITATION_LABEL:
        return TagKind.CITATION_EXPANSION
    if (
        _SUBFIELD_GROUP.fullmatch(tag)
        or tag == "CIT"
        or tag.startswith(CITATION_LABEL)
    ):
        return TagKind.SUBFIELD_GROUP_EXPANSION
    return TagKind.LEAF_FIELD


def strip_trailing(text: str) -> str:
    """Remove trailing whitespace only; leading and inner whitespace stay."""
    return _TRAILING_WHITESPACE.sub("", text)
