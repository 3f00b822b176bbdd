"""
局面导出数据模型

Pydantic 模型，把 GameState 转成便于 JSON 序列化的结构
"""

from __future__ import annotations

from pydantic import BaseModel

from chessfen.state import GameState
from chessfen.types import CASTLING_FLAGS, Piece, Square


class SquareModel(BaseModel):
    """格子模型"""

    col: int
    row: int

    @classmethod
    def from_square(cls, square: Square) -> SquareModel:
        return cls(col=square.col, row=square.row)


class PieceModel(BaseModel):
    """棋子模型"""

    kind: str
    color: str
    square: SquareModel

    @classmethod
    def from_piece(cls, piece: Piece) -> PieceModel:
        return cls(
            kind=piece.kind.value,
            color=piece.color.value,
            square=SquareModel.from_square(piece.square),
        )


class SnapshotModel(BaseModel):
    """局面模型"""

    pieces: list[PieceModel]
    active_color: str
    castling_availability: int
    castling_flags: str  # 如 "KQkq"，无易位时为空字符串
    en_passant: SquareModel | None = None
    half_move_clock: int
    full_move_clock: int

    @classmethod
    def from_state(cls, state: GameState) -> SnapshotModel:
        """从 GameState 构建"""
        rights = state.castling_availability
        return cls(
            pieces=[PieceModel.from_piece(p) for p in state.iter_pieces()],
            active_color=state.active_color.value,
            castling_availability=int(rights),
            castling_flags="".join(ch for ch, flag in CASTLING_FLAGS.items() if rights & flag),
            en_passant=(
                SquareModel.from_square(state.en_passant) if state.en_passant is not None else None
            ),
            half_move_clock=state.half_move_clock,
            full_move_clock=state.full_move_clock,
        )
