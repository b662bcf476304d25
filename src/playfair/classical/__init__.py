from __future__ import annotations

from .digrams import pair_letters, split_with_filler, strip_fillers
from .playfair import PlayfairCipher, decrypt, decrypt_digram, encrypt, encrypt_digram
