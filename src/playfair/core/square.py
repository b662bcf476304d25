from __future__ import annotations

from dataclasses import dataclass, field

from playfair.classical.common import SIZE, SQUARE_ALPHABET, norm_key_alpha


class SquareInvariantError(RuntimeError):
    """A key square is malformed or a letter is missing from it. Always a bug."""


def key_alphabet(keyword: str) -> str:
    """
    Keyword letters in first-seen order followed by the rest of the
    25-letter alphabet. Always exactly 25 distinct letters.
    """
    seen: set[str] = set()
    out: list[str] = []
    for ch in norm_key_alpha(keyword) + SQUARE_ALPHABET:
        if ch not in seen:
            seen.add(ch)
            out.append(ch)
    return "".join(out)


@dataclass(frozen=True)
class KeySquare:
    rows: tuple[tuple[str, ...], ...]

    # letter -> (row, col); derived from rows
    positions: dict[str, tuple[int, int]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.rows) != SIZE or any(len(r) != SIZE for r in self.rows):
            raise SquareInvariantError(f"Key square must be {SIZE}x{SIZE}.")

        positions: dict[str, tuple[int, int]] = {}
        for r, row in enumerate(self.rows):
            for c, ch in enumerate(row):
                if ch in positions:
                    raise SquareInvariantError(f"Letter {ch!r} appears twice in key square.")
                positions[ch] = (r, c)

        if set(positions) != set(SQUARE_ALPHABET):
            raise SquareInvariantError("Key square must hold exactly the letters A-Z without J.")

        object.__setattr__(self, "positions", positions)

    @classmethod
    def from_letters(cls, letters: str) -> "KeySquare":
        return cls(rows=tuple(tuple(letters[i:i + SIZE]) for i in range(0, len(letters), SIZE)))

    def __getitem__(self, row: int) -> tuple[str, ...]:
        return self.rows[row]

    def __iter__(self):
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def at(self, row: int, col: int) -> str:
        """Cell lookup with both coordinates wrapped onto the grid."""
        return self.rows[row % SIZE][col % SIZE]

    @property
    def letters(self) -> str:
        return "".join("".join(r) for r in self.rows)

    def __str__(self) -> str:
        return "\n".join(" ".join(r) for r in self.rows)


def build_key_square(keyword: str) -> KeySquare:
    """Build the 5x5 square for a keyword. Never fails; empty keyword gives the plain alphabet."""
    return KeySquare.from_letters(key_alphabet(keyword))


def locate(square: KeySquare, letter: str) -> tuple[int, int]:
    try:
        return square.positions[letter]
    except KeyError:
        raise SquareInvariantError(f"Letter {letter!r} not found in key square.") from None
