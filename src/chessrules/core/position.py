"""Position: a validated board coordinate.

Board layout (row-major, rank 8 first):
    row 0 = rank 8, row 7 = rank 1
    col 0 = a-file, col 7 = h-file
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import InvalidNotation, OutOfRange

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, col) square on the 8x8 board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise OutOfRange(f"Position coordinates must be integers: {value!r}")
        if not (0 <= self.row <= 7 and 0 <= self.col <= 7):
            raise OutOfRange(f"Position out of board bounds: ({self.row}, {self.col})")

    @classmethod
    def from_notation(cls, notation: str) -> Position:
        """Parse a square name, e.g. 'e4' → Position(4, 4)."""
        if (
            not isinstance(notation, str)
            or len(notation) != 2
            or notation[0] not in _FILES
            or notation[1] not in _RANKS
        ):
            raise InvalidNotation(f"Invalid square name: {notation!r}")
        return cls(8 - int(notation[1]), _FILES.index(notation[0]))

    def to_notation(self) -> str:
        """Human-readable name, e.g. Position(7, 0) → 'a1'."""
        return f"{_FILES[self.col]}{8 - self.row}"

    def offset(self, d_row: int, d_col: int) -> Position | None:
        """Neighbouring square, or ``None`` if it falls off the board."""
        row = self.row + d_row
        col = self.col + d_col
        if 0 <= row <= 7 and 0 <= col <= 7:
            return Position(row, col)
        return None

    @property
    def index(self) -> int:
        """Flat grid index 0–63 (a8=0, h1=63)."""
        return self.row * 8 + self.col

    @property
    def is_light(self) -> bool:
        return (self.row + self.col) % 2 == 0

    def __str__(self) -> str:
        return self.to_notation()


ALL_SQUARES: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(8) for col in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
