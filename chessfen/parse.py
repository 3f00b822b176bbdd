"""FEN 解析入口

提供两种策略：

- 严格模式 `parse`：六个字段必须全部解析成功，按字段顺序遇到的第一个错误直接抛出，
  不返回任何部分结果。
- 宽松模式 `parse_or_else` / `parse_or_default`：从不失败。只有棋盘布局尽量从输入中取，
  其余五个字段（行棋方、易位、吃过路兵、两个步数）一律使用调用方给的默认值，
  即使输入中这些字段完全合法。
"""

from __future__ import annotations

from chessfen.diagnostics import DiagnosticSink
from chessfen.errors import FenError
from chessfen.fields import (
    decode_active_color,
    decode_castling,
    decode_en_passant,
    decode_full_move_clock,
    decode_half_move_clock,
)
from chessfen.logging import logger
from chessfen.placement import decode_placement
from chessfen.state import GameState
from chessfen.tokenize import tokenize


def parse(text: str, sink: DiagnosticSink | None = None) -> GameState:
    """严格解析 FEN 字符串

    Args:
        text: FEN 字符串
        sink: 诊断信息接收方（如一个 list）

    Returns:
        GameState

    Raises:
        FenError: 第一个解析失败的字段对应的错误
    """
    tokens = tokenize(text)

    try:
        pieces = decode_placement(tokens.placement, sink)
        state = GameState(
            active_color=decode_active_color(tokens.active_color),
            castling_availability=decode_castling(tokens.castling),
            en_passant=decode_en_passant(tokens.en_passant),
            half_move_clock=decode_half_move_clock(tokens.half_move_clock),
            full_move_clock=decode_full_move_clock(tokens.full_move_clock),
        )
    except FenError as e:
        logger.debug(f"strict parse failed on {e.field}: {e}")
        raise

    for piece in pieces:
        state.place(piece)
    return state


def parse_or_else(
    text: str, defaults: GameState, sink: DiagnosticSink | None = None
) -> GameState:
    """宽松解析 FEN 字符串

    结果从 defaults 的副本开始，解析出的棋子写到副本的棋盘上；
    布局缺失或格式错误时棋盘保持 defaults 原样。其余字段直接取 defaults。

    Args:
        text: FEN 字符串
        defaults: 默认局面，不会被修改
        sink: 诊断信息接收方

    Returns:
        GameState
    """
    state = defaults.copy()

    try:
        pieces = decode_placement(tokenize(text).placement, sink)
    except FenError as e:
        logger.debug(f"placement ignored, keeping default board: {e}")
        pieces = []

    for piece in pieces:
        state.place(piece)
    return state


def parse_or_default(text: str, sink: DiagnosticSink | None = None) -> GameState:
    """宽松解析，默认值为空白局面"""
    return parse_or_else(text, GameState.blank(), sink)
