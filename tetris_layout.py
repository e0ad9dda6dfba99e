# tetris_layout.py
from dataclasses import dataclass
from typing import Mapping
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

MARGIN = 16
PANEL_W = 180

@dataclass(frozen=True)
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_x: int
    board_y: int

    @property
    def board_w(self) -> int: return COLS * self.cell
    @property
    def board_h(self) -> int: return ROWS * self.cell
    @property
    def panel_x(self) -> int: return self.board_x + self.board_w + self.margin
    @property
    def panel_y(self) -> int: return self.board_y
    @property
    def total_w(self) -> int: return self.panel_x + self.panel_w + self.margin
    @property
    def total_h(self) -> int: return self.board_y + self.board_h + self.margin
    @property
    def preview_cell(self) -> int: return self.cell // 2

def compute_dims(config: Mapping = CONFIG) -> Dims:
    return Dims(cell=int(config["CELL_SIZE"]), margin=MARGIN, panel_w=PANEL_W,
                board_x=MARGIN, board_y=MARGIN)
