"""
Cup-name codec: maps a cup index to a region's cup name and back.

Index 0 is always the smallest cup. Indices inside the region's base list
map to the listed name; past the end, names are synthesized as "<n><Letter>"
with the alphabet restarting every 26 positions:

    len(names)      → "1A"
    len(names) + 25 → "1Z"
    len(names) + 26 → "2A"

decode_cup_name() never raises. Names it cannot parse decode to index 0,
the smallest cup, so callers cannot distinguish "AA" from a malformed string.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_ALPHABET_SIZE = 26
_EXTENDED_NAME = re.compile(r"^(\d+)([A-Z]+)$")


def encode_cup_name(index: int, names: Sequence[str]) -> str:
    """Return the cup name for *index* in the region list *names*."""
    index = max(index, 0)
    if index < len(names):
        return names[index]
    beyond = index - len(names)
    letter = chr(ord("A") + beyond % _ALPHABET_SIZE)
    number = beyond // _ALPHABET_SIZE + 1
    return f"{number}{letter}"


def decode_cup_name(name: str, names: Sequence[str]) -> int:
    """Return the cup index for *name*, or 0 if it is not recognised."""
    if name in names:
        return list(names).index(name)

    match = _EXTENDED_NAME.match(name)
    if match is None:
        return 0
    number = int(match.group(1))
    letter_offset = ord(match.group(2)[0]) - ord("A")
    index = len(names) + (number - 1) * _ALPHABET_SIZE + letter_offset
    return max(index, 0)
