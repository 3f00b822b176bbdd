"""
核心类型定义

定义 FEN 解析中用到的基础数据类型和符号表
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import NamedTuple


class Color(Enum):
    """棋子颜色/阵营"""

    WHITE = "white"
    BLACK = "black"

    @property
    def opposite(self) -> Color:
        """获取对方阵营"""
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class Kind(Enum):
    """棋子类型"""

    PAWN = "pawn"
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"


class Square(NamedTuple):
    """棋盘格子 (col, row)

    col: 0-7 (a-h)
    row: 0-7 (0 是白方底线 rank 1，7 是黑方底线 rank 8)
    """

    col: int
    row: int

    def is_valid(self) -> bool:
        """检查位置是否在棋盘范围内"""
        return 0 <= self.col <= 7 and 0 <= self.row <= 7


class CastlingRights(IntFlag):
    """易位权利位掩码"""

    NONE = 0
    WHITE_KINGSIDE = 1 << 0
    WHITE_QUEENSIDE = 1 << 1
    BLACK_KINGSIDE = 1 << 2
    BLACK_QUEENSIDE = 1 << 3
    ALL = WHITE_KINGSIDE | WHITE_QUEENSIDE | BLACK_KINGSIDE | BLACK_QUEENSIDE


@dataclass(frozen=True)
class Piece:
    """棋盘上的一个棋子"""

    kind: Kind
    color: Color
    square: Square

    @property
    def symbol(self) -> str:
        """FEN 字母，白方大写"""
        char = KIND_TO_CHAR[self.kind]
        return char.upper() if self.color == Color.WHITE else char


# =============================================================================
# 常量定义
# =============================================================================

BOARD_SIZE = 8

# 棋子类型 -> 字符
KIND_TO_CHAR: dict[Kind, str] = {
    Kind.PAWN: "p",
    Kind.ROOK: "r",
    Kind.KNIGHT: "n",
    Kind.BISHOP: "b",
    Kind.QUEEN: "q",
    Kind.KING: "k",
}

# 字符 -> 棋子类型（大小写都接受，大小写决定颜色）
CHAR_TO_KIND: dict[str, Kind] = {v: k for k, v in KIND_TO_CHAR.items()}
CHAR_TO_KIND.update({v.upper(): k for k, v in KIND_TO_CHAR.items()})

# 列号 -> 字母
COL_TO_CHAR = "abcdefgh"
CHAR_TO_COL = {c: i for i, c in enumerate(COL_TO_CHAR)}

# 易位字母 -> 位
CASTLING_FLAGS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# 行棋方字母
CHAR_TO_COLOR: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
