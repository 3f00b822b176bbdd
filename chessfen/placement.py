"""棋盘布局字段解码

布局字段由 8 组 `/` 分隔的行组成，从 rank 8 到 rank 1。
每组 1-8 个字符，字符为棋子字母（prnbqk，大写白方小写黑方）或数字 1-8（连续空格）。
"""

from __future__ import annotations

from chessfen.diagnostics import Diagnostic, DiagnosticSink, report
from chessfen.errors import IncompleteFenError, MalformedFieldError
from chessfen.types import BOARD_SIZE, CHAR_TO_KIND, Color, Piece, Square

FIELD = "placement"

RANK_SEPARATOR = "/"
EMPTY_DIGITS = frozenset("12345678")
RANK_CHARS = frozenset(CHAR_TO_KIND) | EMPTY_DIGITS


def check_placement_shape(token: str) -> list[str]:
    """检查布局字段的整体结构

    Args:
        token: 布局字段

    Returns:
        8 个行字符串，从 rank 8 到 rank 1

    Raises:
        MalformedFieldError: 结构不匹配
    """
    groups = token.split(RANK_SEPARATOR)
    if len(groups) != BOARD_SIZE:
        raise MalformedFieldError(
            FIELD, token, f"Invalid placement: expected 8 ranks, got {len(groups)}"
        )

    for idx, group in enumerate(groups):
        if not 1 <= len(group) <= BOARD_SIZE:
            raise MalformedFieldError(
                FIELD,
                token,
                f"Invalid placement: rank group {idx + 1} has {len(group)} characters",
            )
        for ch in group:
            if ch not in RANK_CHARS:
                raise MalformedFieldError(
                    FIELD, token, f"Invalid placement: unexpected character {ch!r}"
                )

    return groups


def decode_rank(row: int, group: str, sink: DiagnosticSink | None = None) -> list[Piece]:
    """解码单行

    列游标从 0 开始；棋子字母放子并前进 1 列，数字跳过对应数量的空格。
    游标到达 8 之后剩余字符被丢弃，非法字符被忽略，两者都只产生诊断。

    Args:
        row: 行号 0-7，超出范围时返回空列表
        group: 行字符串
        sink: 诊断信息接收方

    Returns:
        该行的棋子列表
    """
    pieces: list[Piece] = []
    if not 0 <= row < BOARD_SIZE:
        return pieces

    col = 0

    for ch in group:
        if col >= BOARD_SIZE:
            report(
                sink,
                Diagnostic(
                    row=row,
                    message=f"rank {row} should have been blank but there are more pieces, ignoring them",
                    char=ch,
                ),
            )
            break

        kind = CHAR_TO_KIND.get(ch)
        if kind is not None:
            color = Color.WHITE if ch.isupper() else Color.BLACK
            pieces.append(Piece(kind=kind, color=color, square=Square(col, row)))
            col += 1
        elif ch in EMPTY_DIGITS:
            col += int(ch)
        else:
            report(
                sink,
                Diagnostic(row=row, message=f"unexpected token {ch!r} in rank {row}", char=ch),
            )

    return pieces


def decode_placement(token: str | None, sink: DiagnosticSink | None = None) -> list[Piece]:
    """解码布局字段

    Args:
        token: 布局字段，缺失为 None
        sink: 诊断信息接收方

    Returns:
        所有棋子，按 rank 8 到 rank 1、每行从左到右的顺序

    Raises:
        IncompleteFenError: 字段缺失
        MalformedFieldError: 结构不匹配
    """
    if token is None:
        raise IncompleteFenError(FIELD)

    groups = check_placement_shape(token)

    pieces: list[Piece] = []
    for idx, group in enumerate(groups):
        # FEN 从上往下是 row 7 到 row 0
        pieces.extend(decode_rank(BOARD_SIZE - 1 - idx, group, sink))
    return pieces
