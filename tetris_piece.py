
"""Piece model, immutable shape catalog, rotation"""
from dataclasses import dataclass, replace
from typing import List, Tuple

COLS, ROWS = 10, 20

Shape = Tuple[Tuple[int, ...], ...]

PIECES = ("I", "O", "T", "J", "L", "S", "Z")

COLORS = ("red", "green", "blue", "yellow", "cyan", "purple", "orange")

SHAPES = {
    "I": ((1,1,1,1),),
    "O": ((1,1),(1,1)),
    "T": ((0,1,0),(1,1,1)),
    "J": ((1,0,0),(1,1,1)),
    "L": ((0,0,1),(1,1,1)),
    "S": ((0,1,1),(1,1,0)),
    "Z": ((1,1,0),(0,1,1)),
}

SPAWN_X, SPAWN_Y = COLS // 2 - 2, 0

def rotate_cw(m: Shape) -> Shape: return tuple(tuple(r) for r in zip(*m[::-1]))
def rotate_ccw(m: Shape) -> Shape: return tuple(tuple(c) for c in zip(*m))[::-1]

def rotate(m: Shape, cw: bool = True) -> Shape:
    return rotate_cw(m) if cw else rotate_ccw(m)

def cell_count(m: Shape) -> int:
    return sum(1 for row in m for v in row if v)

@dataclass(frozen=True)
class Piece:
    t: str
    shape: Shape
    state: int  # rotation count 0..3
    x: int
    y: int
    color: str = COLORS[0]

    @staticmethod
    def spawn(t: str, color: str = COLORS[0]) -> "Piece":
        return Piece(t, SHAPES[t], 0, SPAWN_X, SPAWN_Y, color)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self, cw: bool = True) -> "Piece":
        state = (self.state + (1 if cw else -1)) % 4
        return replace(self, shape=rotate(self.shape, cw), state=state)

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute (x, y) of every occupied cell, including rows above the board."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]
