"""FEN 解析错误"""

from __future__ import annotations

from enum import Enum


class FenErrorKind(Enum):
    """错误类别"""

    # 缺少必需的字段
    INCOMPLETE_FEN = "incomplete_fen"
    # 字段存在但取值非法（颜色字母、非数字的步数）
    ILLEGAL_INPUT = "illegal_input"
    # 字段存在但结构不匹配（棋盘布局、吃过路兵格子）
    GENERIC = "generic"


class FenError(ValueError):
    """FEN 解析失败

    Attributes:
        kind: 错误类别
        field: 出错的字段名，如 "placement"、"en_passant"
        token: 出错的原始字段内容，缺失时为 None
    """

    kind: FenErrorKind = FenErrorKind.GENERIC

    def __init__(self, field: str, token: str | None, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.token = token


class IncompleteFenError(FenError):
    """缺少字段"""

    kind = FenErrorKind.INCOMPLETE_FEN

    def __init__(self, field: str) -> None:
        super().__init__(field, None, f"Incomplete FEN: missing {field} field")


class IllegalInputError(FenError):
    """字段取值非法"""

    kind = FenErrorKind.ILLEGAL_INPUT


class MalformedFieldError(FenError):
    """字段结构不匹配"""

    kind = FenErrorKind.GENERIC
