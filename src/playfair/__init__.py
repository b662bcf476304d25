from playfair.classical.digrams import pair_letters, split_with_filler, strip_fillers
from playfair.classical.playfair import PlayfairCipher, decrypt, encrypt
from playfair.core.square import KeySquare, SquareInvariantError, build_key_square, locate
from playfair.core.utils import normalize_text

__all__ = [
    "KeySquare",
    "PlayfairCipher",
    "SquareInvariantError",
    "build_key_square",
    "decrypt",
    "encrypt",
    "locate",
    "normalize_text",
    "pair_letters",
    "split_with_filler",
    "strip_fillers",
]
