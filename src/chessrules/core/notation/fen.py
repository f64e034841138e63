"""FEN decoding and encoding for :class:`Board`."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.errors import InvalidFEN, InvalidNotation
from chessrules.core.piece import Piece
from chessrules.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)


def board_from_fen(fen: str) -> Board:
    """Parse a six-field FEN string into a :class:`Board`.

    Castling rights and clocks are taken verbatim from the string.
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        raise InvalidFEN(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFEN(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidFEN(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise InvalidFEN(f"Invalid FEN rank width: {fen!r}")
                sq = Position(row, col)
                try:
                    board[sq] = Piece.from_char(ch, sq)
                except ValueError:
                    raise InvalidFEN(f"Invalid FEN piece {ch!r}: {fen!r}") from None
                col += 1
            if col > 8:
                raise InvalidFEN(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise InvalidFEN(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        board.current_turn = Color.WHITE
    elif side_part == "b":
        board.current_turn = Color.BLACK
    else:
        raise InvalidFEN(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        rights = dict(_CASTLING_CHARS)
        if not castling_part or len(set(castling_part)) != len(castling_part):
            raise InvalidFEN(f"Invalid FEN castling field: {castling_part!r}")
        for ch in castling_part:
            right = rights.get(ch)
            if right is None:
                raise InvalidFEN(f"Invalid FEN castling field: {castling_part!r}")
            castling |= right
    board.castling = castling

    # 4. En passant
    if ep_part != "-":
        try:
            ep = Position.from_notation(ep_part)
        except InvalidNotation:
            raise InvalidFEN(f"Invalid FEN en-passant square: {ep_part!r}") from None
        # White to move → black just pushed, target on rank 6 (row 2).
        expected_row = 2 if board.current_turn == Color.WHITE else 5
        if ep.row != expected_row:
            raise InvalidFEN(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        board.en_passant = ep

    # 5–6. Clocks
    if not _is_number(half_part):
        raise InvalidFEN(f"Invalid FEN halfmove clock: {half_part!r}")
    if not _is_number(full_part) or int(full_part) < 1:
        raise InvalidFEN(f"Invalid FEN fullmove number: {full_part!r}")
    board.halfmove_clock = int(half_part)
    board.fullmove_number = int(full_part)

    return board


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    # 1. Board
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[Position(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if board.current_turn == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if board.castling & right)
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = board.en_passant.to_notation() if board.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{board.halfmove_clock} {board.fullmove_number}"
    )


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()
