from .square import KeySquare, SquareInvariantError, build_key_square, key_alphabet, locate
from .utils import normalize_az, normalize_text

__all__ = [
    "KeySquare",
    "SquareInvariantError",
    "build_key_square",
    "key_alphabet",
    "locate",
    "normalize_az",
    "normalize_text",
]
