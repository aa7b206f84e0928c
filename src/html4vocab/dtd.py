from __future__ import annotations

import enum


class DTD(enum.IntEnum):
    """HTML 4.01 document type definitions, ordered by permissiveness."""

    STRICT = 0
    LOOSE = 1
    FRAMESET = 2


def classify(code: str) -> DTD:
    """Map a one-letter DTD column code to its DTD.

    Anything other than "L" or "F" (including the blank cell used for
    constructs available everywhere) is STRICT.
    """
    if code == "L":
        return DTD.LOOSE
    if code == "F":
        return DTD.FRAMESET
    return DTD.STRICT
