from __future__ import annotations

from playfair.classical.common import DEFAULT_FILLER, FALLBACK_FILLER, check_fillers, pick_filler
from playfair.core.utils import chunked


def split_with_filler(
    letters: str,
    *,
    filler: str = DEFAULT_FILLER,
    fallback: str = FALLBACK_FILLER,
) -> list[str]:
    """
    Split normalized letters into digrams for encryption.

    A doubled pair becomes (first, filler) and the second letter starts the
    next pair. A trailing single letter is padded with a filler. The filler
    is `fallback` whenever the letter it pairs with is `filler` itself.
    """
    check_fillers(filler, fallback)

    out: list[str] = []
    i = 0
    n = len(letters)
    while i < n:
        first = letters[i]
        second = letters[i + 1] if i + 1 < n else None

        if second is None or second == first:
            out.append(first + pick_filler(first, filler, fallback))
            i += 1
        else:
            out.append(first + second)
            i += 2
    return out


def pair_letters(letters: str) -> list[str]:
    """Group ciphertext letters two at a time. Odd length is rejected."""
    if len(letters) % 2:
        raise ValueError(
            f"Ciphertext must have an even number of letters after cleanup, got {len(letters)}."
        )
    return ["".join(chunk) for chunk in chunked(letters, 2)]


def strip_fillers(
    text: str,
    *,
    filler: str = DEFAULT_FILLER,
    fallback: str = FALLBACK_FILLER,
) -> str:
    """
    Best-effort removal of encryption fillers from decrypted text.

    Only second positions of digrams are candidates: a filler between two
    identical letters is dropped (LXL -> LL), as is a filler in the final
    position. Genuine X/Q letters in those spots are lost too.
    """
    check_fillers(filler, fallback)

    out: list[str] = []
    n = len(text)
    for i, ch in enumerate(text):
        if i % 2 == 1 and ch == pick_filler(text[i - 1], filler, fallback):
            if i == n - 1:
                continue
            if text[i - 1] == text[i + 1]:
                continue
        out.append(ch)
    return "".join(out)
