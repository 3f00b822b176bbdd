"""行棋方、易位、吃过路兵和步数字段的解码"""

from __future__ import annotations

from chessfen.errors import IllegalInputError, IncompleteFenError, MalformedFieldError
from chessfen.types import CASTLING_FLAGS, CHAR_TO_COLOR, CastlingRights, Color, Square

# 吃过路兵目标格只可能出现在这两行
EN_PASSANT_FILES = "abcdefg"
EN_PASSANT_RANKS = "36"

DIGITS = frozenset("0123456789")


def decode_active_color(token: str | None) -> Color:
    """解码行棋方：w 白方，b 黑方"""
    if token is None:
        raise IncompleteFenError("active_color")

    color = CHAR_TO_COLOR.get(token)
    if color is None:
        raise IllegalInputError("active_color", token, f"Invalid active color: {token!r}")
    return color


def decode_castling(token: str | None) -> CastlingRights:
    """解码易位权利

    逐字符扫描 K Q k q，每个字母置对应的位；重复无影响，顺序无关。
    其他字符（包括表示“无”的 `-`）直接忽略。
    """
    if token is None:
        raise IncompleteFenError("castling")

    rights = CastlingRights.NONE
    for ch in token:
        rights |= CASTLING_FLAGS.get(ch, CastlingRights.NONE)
    return rights


def decode_en_passant(token: str | None) -> Square:
    """解码吃过路兵目标格

    格式为 a-g 中的一个列字母加 3 或 6。`-` 不匹配该格式，会被当作结构错误。

    行号直接取数字本身（e3 -> row 3），不做 rank - 1 的换算。

    Raises:
        IncompleteFenError: 字段缺失
        MalformedFieldError: 格式不匹配
    """
    if token is None:
        raise IncompleteFenError("en_passant")

    if len(token) != 2 or token[0] not in EN_PASSANT_FILES or token[1] not in EN_PASSANT_RANKS:
        raise MalformedFieldError(
            "en_passant", token, f"Invalid en passant square: {token!r}"
        )

    return Square(ord(token[0]) - ord("a"), int(token[1]))


def _decode_clock(field: str, token: str | None) -> int:
    """十进制整数，可带正负号，不检查范围"""
    if token is None:
        raise IncompleteFenError(field)

    digits = token[1:] if token[:1] in ("+", "-") else token
    if not digits or any(ch not in DIGITS for ch in digits):
        raise IllegalInputError(field, token, f"Invalid {field}: {token!r} is not an integer")

    try:
        return int(token)
    except ValueError as e:
        # 超过整数字符串转换的位数上限
        raise IllegalInputError(field, token, f"Invalid {field}: too many digits") from e


def decode_half_move_clock(token: str | None) -> int:
    """解码半回合计数（距上次吃子或走兵的半回合数）"""
    return _decode_clock("half_move_clock", token)


def decode_full_move_clock(token: str | None) -> int:
    """解码回合数"""
    return _decode_clock("full_move_clock", token)
