"""FEN 验证"""

from __future__ import annotations

from chessfen.diagnostics import Diagnostic
from chessfen.errors import FenError
from chessfen.parse import parse


def validate_fen(fen: str, strict_ranks: bool = False) -> tuple[bool, str]:
    """验证 FEN 能否被严格解析

    Args:
        fen: FEN 字符串
        strict_ranks: 为 True 时，行内多余或无法识别的字符也视为不合法

    Returns:
        (is_valid, error_message)
    """
    diagnostics: list[Diagnostic] = []
    try:
        parse(fen, diagnostics)
    except FenError as e:
        return False, f"{e.kind.value} ({e.field}): {e}"

    if strict_ranks and diagnostics:
        return False, f"rank {diagnostics[0].row}: {diagnostics[0].message}"

    return True, "OK"
