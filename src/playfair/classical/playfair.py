from __future__ import annotations

from playfair.classical.common import DEFAULT_FILLER, FALLBACK_FILLER
from playfair.classical.digrams import pair_letters, split_with_filler
from playfair.core.square import KeySquare, build_key_square, locate
from playfair.core.utils import normalize_text


def _substitute(square: KeySquare, digram: str, shift: int) -> str:
    """
    Apply the Playfair rules to one digram. `shift` is +1 to encrypt and
    -1 to decrypt; the rectangle rule is its own inverse and ignores it.
    """
    r1, c1 = locate(square, digram[0])
    r2, c2 = locate(square, digram[1])

    if r1 != r2 and c1 != c2:
        # rectangle: swap columns, keep rows
        return square.at(r1, c2) + square.at(r2, c1)
    if r1 == r2:
        return square.at(r1, c1 + shift) + square.at(r2, c2 + shift)
    return square.at(r1 + shift, c1) + square.at(r2 + shift, c2)


def encrypt_digram(square: KeySquare, digram: str) -> str:
    return _substitute(square, digram, 1)


def decrypt_digram(square: KeySquare, digram: str) -> str:
    return _substitute(square, digram, -1)


def encrypt(
    plaintext: str,
    keyword: str,
    *,
    filler: str = DEFAULT_FILLER,
    fallback: str = FALLBACK_FILLER,
) -> str:
    """Encrypt text with a keyword. Output is uppercase letters of even length."""
    square = build_key_square(keyword)
    digrams = split_with_filler(normalize_text(plaintext), filler=filler, fallback=fallback)
    return "".join(encrypt_digram(square, d) for d in digrams)


def decrypt(ciphertext: str, keyword: str) -> str:
    """
    Decrypt text with a keyword. Fillers inserted at encryption time are
    left in place (see strip_fillers). Raises ValueError when the cleaned
    ciphertext has an odd number of letters.
    """
    square = build_key_square(keyword)
    digrams = pair_letters(normalize_text(ciphertext))
    return "".join(decrypt_digram(square, d) for d in digrams)


class PlayfairCipher:
    name = "playfair"

    def __init__(self, filler: str = DEFAULT_FILLER, fallback: str = FALLBACK_FILLER) -> None:
        self.filler = filler
        self.fallback = fallback

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, key, filler=self.filler, fallback=self.fallback)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, key)

    def square(self, key: str) -> KeySquare:
        return build_key_square(key)

    def fingerprint(self, ciphertext: str) -> dict:
        letters = normalize_text(ciphertext)
        # Playfair output never has a doubled letter inside a digram
        doubled = any(a == b for a, b in zip(letters[0::2], letters[1::2]))
        return {
            "family": "polygraphic",
            "letters": len(letters),
            "even_length": len(letters) % 2 == 0,
            "has_j": "J" in ciphertext.upper(),
            "doubled_digram": doubled,
        }
