from __future__ import annotations

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# J shares a cell with I
SQUARE_ALPHABET = ALPHABET.replace("J", "")
SIZE = 5

DEFAULT_FILLER = "X"
FALLBACK_FILLER = "Q"


def norm_key_alpha(key: str) -> str:
    """Uppercase, keep only A-Z, fold J into I."""
    return "".join(ch for ch in key.upper() if "A" <= ch <= "Z").replace("J", "I")


def check_fillers(filler: str, fallback: str) -> None:
    for name, ch in (("filler", filler), ("fallback", fallback)):
        if len(ch) != 1 or ch not in SQUARE_ALPHABET:
            raise ValueError(f"{name.capitalize()} must be a single letter A-Z other than J, got {ch!r}.")
    if filler == fallback:
        raise ValueError("Filler and fallback filler must differ.")


def pick_filler(letter: str, filler: str = DEFAULT_FILLER, fallback: str = FALLBACK_FILLER) -> str:
    """Filler to pair with `letter`; never equal to it."""
    return fallback if letter == filler else filler
