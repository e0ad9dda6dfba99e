
"""Board helpers: occupancy, collide, merge, sweep, landing row"""
from typing import Optional, Tuple
from tetris_piece import Piece, COLS, ROWS

Row = Tuple[Optional[str], ...]
Board = Tuple[Row, ...]

EMPTY_ROW: Row = (None,) * COLS

def empty_board() -> Board:
    return (EMPTY_ROW,) * ROWS

def is_occupied(board: Board, x: int, y: int) -> bool:
    # walls and floor are solid, the area above row 0 is open
    if x < 0 or x >= COLS or y >= ROWS: return True
    if y < 0: return False
    return bool(board[y][x])

def collide(board: Board, piece: Piece) -> bool:
    return any(is_occupied(board, x, y) for x, y in piece.cells())

def merge(board: Board, piece: Piece) -> Board:
    """Return a new board with the piece written in; cells above row 0 are dropped."""
    rows = [list(r) for r in board]
    for x, y in piece.cells():
        if y >= 0:
            rows[y][x] = piece.color
    return tuple(tuple(r) for r in rows)

def sweep(board: Board) -> Tuple[Board, int]:
    """Remove full rows, pad with empty rows on top; return (board, cleared)."""
    kept = tuple(r for r in board if not all(r))
    cleared = ROWS - len(kept)
    return (EMPTY_ROW,) * cleared + kept, cleared

def drop_y(board: Board, piece: Piece) -> int:
    """Return the lowest y the piece can fall to from where it is."""
    y = piece.y
    while not collide(board, piece.moved(dy=y - piece.y + 1)):
        y += 1
    return y
