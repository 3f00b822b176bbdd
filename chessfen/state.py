"""解析结果：局面快照"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from chessfen.types import BOARD_SIZE, CastlingRights, Color, Piece, Square

Grid = list[list[Piece | None]]


def empty_grid() -> Grid:
    """8x8 空棋盘，组织方式 [row][col]"""
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


@dataclass
class GameState:
    """FEN 解析后的局面

    pieces 的组织方式为 [row][col]，row 0 是 rank 1，row 7 是 rank 8。
    """

    pieces: Grid = field(default_factory=empty_grid)
    active_color: Color = Color.WHITE
    castling_availability: CastlingRights = CastlingRights.NONE
    en_passant: Square | None = None
    # 距上次吃子或走兵的半回合数
    half_move_clock: int = 0
    # 回合数，从 1 开始，黑方走完后加 1
    full_move_clock: int = 1

    @classmethod
    def blank(cls) -> GameState:
        """空棋盘、白方先走、无易位、无吃过路兵、步数 0/1"""
        return cls()

    def copy(self) -> GameState:
        """复制局面（棋盘独立，棋子本身不可变可共享）"""
        return GameState(
            pieces=[list(row) for row in self.pieces],
            active_color=self.active_color,
            castling_availability=self.castling_availability,
            en_passant=self.en_passant,
            half_move_clock=self.half_move_clock,
            full_move_clock=self.full_move_clock,
        )

    def place(self, piece: Piece) -> None:
        """放置棋子，已有棋子直接被覆盖"""
        self.pieces[piece.square.row][piece.square.col] = piece

    def piece_at(self, square: Square) -> Piece | None:
        """获取指定格子上的棋子"""
        return self.pieces[square.row][square.col]

    def iter_pieces(self) -> Iterator[Piece]:
        """按 rank 1 到 rank 8、每行从 a 到 h 的顺序遍历棋子"""
        for row in self.pieces:
            for piece in row:
                if piece is not None:
                    yield piece

    def piece_count(self, color: Color | None = None) -> int:
        """棋子数量，可按颜色过滤"""
        return sum(1 for p in self.iter_pieces() if color is None or p.color == color)
