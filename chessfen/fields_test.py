"""字段解码测试"""

import sys

import pytest

from chessfen.errors import (
    FenErrorKind,
    IllegalInputError,
    IncompleteFenError,
    MalformedFieldError,
)
from chessfen.fields import (
    decode_active_color,
    decode_castling,
    decode_en_passant,
    decode_full_move_clock,
    decode_half_move_clock,
)
from chessfen.types import CastlingRights, Color, Square


class TestActiveColor:
    """测试行棋方"""

    def test_white(self):
        assert decode_active_color("w") == Color.WHITE

    def test_black(self):
        assert decode_active_color("b") == Color.BLACK

    def test_missing(self):
        with pytest.raises(IncompleteFenError):
            decode_active_color(None)

    @pytest.mark.parametrize("token", ["W", "x", "white", "wb"])
    def test_illegal(self, token):
        """大写和其他字母都非法"""
        with pytest.raises(IllegalInputError) as exc:
            decode_active_color(token)
        assert exc.value.kind == FenErrorKind.ILLEGAL_INPUT
        assert exc.value.token == token


class TestCastling:
    """测试易位权利"""

    def test_all(self):
        assert decode_castling("KQkq") == 15
        assert decode_castling("KQkq") == CastlingRights.ALL

    def test_partial(self):
        """Kq = bit0 | bit3"""
        assert decode_castling("Kq") == 9

    def test_dash(self):
        assert decode_castling("-") == 0

    def test_order_and_duplicates(self):
        """顺序无关，重复无影响"""
        assert decode_castling("qkQK") == decode_castling("KKQQkkqq") == 15

    def test_unrelated_chars_ignored(self):
        assert decode_castling("xK-z") == CastlingRights.WHITE_KINGSIDE

    def test_missing(self):
        with pytest.raises(IncompleteFenError):
            decode_castling(None)


class TestEnPassant:
    """测试吃过路兵目标格"""

    def test_rank_three(self):
        """行号直接取数字"""
        assert decode_en_passant("e3") == Square(4, 3)

    def test_rank_six(self):
        assert decode_en_passant("a6") == Square(0, 6)
        assert decode_en_passant("g6") == Square(6, 6)

    def test_dash_rejected(self):
        """`-` 不匹配格式"""
        with pytest.raises(MalformedFieldError) as exc:
            decode_en_passant("-")
        assert exc.value.kind == FenErrorKind.GENERIC
        assert exc.value.field == "en_passant"

    @pytest.mark.parametrize("token", ["h3", "e4", "E3", "e", "e33", ""])
    def test_malformed(self, token):
        """h 列和其他行都不接受"""
        with pytest.raises(MalformedFieldError):
            decode_en_passant(token)

    def test_missing(self):
        with pytest.raises(IncompleteFenError):
            decode_en_passant(None)


class TestMoveClocks:
    """测试步数"""

    def test_values(self):
        assert decode_half_move_clock("0") == 0
        assert decode_full_move_clock("42") == 42

    def test_negative_accepted(self):
        """不检查范围"""
        assert decode_half_move_clock("-3") == -3
        assert decode_full_move_clock("+7") == 7

    @pytest.mark.parametrize("token", ["xyz", "1.5", "1_000", "-", "+", "٣"])
    def test_non_numeric(self, token):
        with pytest.raises(IllegalInputError):
            decode_full_move_clock(token)

    def test_missing(self):
        with pytest.raises(IncompleteFenError) as exc:
            decode_half_move_clock(None)
        assert exc.value.field == "half_move_clock"

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
        reason="no integer string conversion limit",
    )
    def test_too_many_digits(self):
        """超过整数位数上限也是 IllegalInputError"""
        token = "1" * (sys.get_int_max_str_digits() + 1)
        with pytest.raises(IllegalInputError) as exc:
            decode_full_move_clock(token)
        assert exc.value.field == "full_move_clock"
        assert exc.value.token == token
