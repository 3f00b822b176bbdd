"""FEN 字段切分"""

from __future__ import annotations

from typing import NamedTuple


class FenTokens(NamedTuple):
    """FEN 的六个字段，缺失的尾部字段为 None"""

    placement: str | None = None
    active_color: str | None = None
    castling: str | None = None
    en_passant: str | None = None
    half_move_clock: str | None = None
    full_move_clock: str | None = None


FIELD_NAMES = FenTokens._fields


def tokenize(text: str) -> FenTokens:
    """按空白切分 FEN 字符串

    不做任何校验；少于六个字段是正常情况，由各字段解码器报告缺失。
    多于六个字段时忽略多余部分。

    Examples:
        >>> tokenize("8/8/8/8/8/8/8/8 w")
        FenTokens(placement='8/8/8/8/8/8/8/8', active_color='w', castling=None, en_passant=None, half_move_clock=None, full_move_clock=None)
    """
    parts = text.split()
    return FenTokens(*parts[: len(FIELD_NAMES)])
