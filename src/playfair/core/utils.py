from __future__ import annotations

import re
from typing import Iterable


_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    s = f"{s}".upper()
    return _AZ_ONLY_RE.sub("", s)


def normalize_text(s: str) -> str:
    """
    Letters-only form used by the 25-letter square:
    uppercase, strip everything outside A-Z, fold J into I.
    """
    return normalize_az(s).replace("J", "I")


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
