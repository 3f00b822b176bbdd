"""局面显示函数（ASCII、Unicode）"""

from __future__ import annotations

from collections.abc import Callable

from chessfen.state import GameState
from chessfen.types import BOARD_SIZE, COL_TO_CHAR, Piece

# 符号映射（用于终端/markdown 显示）
PIECE_SYMBOLS = {
    # 白方（大写）
    "K": "♔",
    "Q": "♕",
    "R": "♖",
    "B": "♗",
    "N": "♘",
    "P": "♙",
    # 黑方（小写）
    "k": "♚",
    "q": "♛",
    "r": "♜",
    "b": "♝",
    "n": "♞",
    "p": "♟",
}

EMPTY_SYMBOL = "·"


def _render(state: GameState, symbol_of: Callable[[Piece], str], empty: str) -> str:
    """按 rank 8 到 rank 1 逐行渲染棋盘，最后一行是列字母"""
    lines = []
    # rank 8 在最上面
    for row in range(BOARD_SIZE - 1, -1, -1):
        line = [f"{row + 1}"]
        for piece in state.pieces[row]:
            line.append(empty if piece is None else symbol_of(piece))
        lines.append(" ".join(line))

    lines.append("  " + " ".join(COL_TO_CHAR))
    return "\n".join(lines)


def board_to_ascii(state: GameState) -> str:
    """将局面转换为 ASCII 棋盘图（FEN 字母，空格为 .）

    Args:
        state: 局面

    Returns:
        ASCII 棋盘字符串
    """
    return _render(state, lambda p: p.symbol, ".")


def board_to_unicode(state: GameState) -> str:
    """将局面转换为棋子符号版棋盘图"""

    def symbol_of(piece: Piece) -> str:
        return PIECE_SYMBOLS[piece.symbol]

    return _render(state, symbol_of, EMPTY_SYMBOL)
