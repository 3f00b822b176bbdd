"""
国际象棋 FEN (Forsyth–Edwards Notation) 解析

## 格式

    <棋盘> <行棋方> <易位> <吃过路兵> <半回合计数> <回合数>

### 棋盘部分

从 rank 8 到 rank 1，每行用 `/` 分隔。

符号约定：
- 白方：K(王) Q(后) R(车) B(象) N(马) P(兵)
- 黑方：k q r b n p
- 空格：数字 (1-8)

### 其余字段

- 行棋方：`w`（白方走）或 `b`（黑方走）
- 易位：`K Q k q` 的任意组合，`-` 表示无
- 吃过路兵：目标格 `[a-g][36]`
- 半回合计数、回合数：十进制整数

## 解析策略

- `parse`：严格模式，任一字段失败即抛出 FenError
- `parse_or_else` / `parse_or_default`：宽松模式，只取棋盘布局，其余字段用默认值

## 示例

初始局面：
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
"""

# Types
from chessfen.types import (
    CASTLING_FLAGS,
    CHAR_TO_COL,
    CHAR_TO_KIND,
    COL_TO_CHAR,
    KIND_TO_CHAR,
    CastlingRights,
    Color,
    Kind,
    Piece,
    Square,
)

# Errors
from chessfen.errors import (
    FenError,
    FenErrorKind,
    IllegalInputError,
    IncompleteFenError,
    MalformedFieldError,
)

# Diagnostics
from chessfen.diagnostics import Diagnostic, DiagnosticSink

# State
from chessfen.state import GameState

# Decoders
from chessfen.tokenize import FenTokens, tokenize
from chessfen.placement import decode_placement, decode_rank
from chessfen.fields import (
    decode_active_color,
    decode_castling,
    decode_en_passant,
    decode_full_move_clock,
    decode_half_move_clock,
)

# Parse
from chessfen.parse import parse, parse_or_default, parse_or_else

# Validate
from chessfen.validate import validate_fen

# Display
from chessfen.display import board_to_ascii, board_to_unicode

# Models
from chessfen.models import PieceModel, SnapshotModel, SquareModel

__all__ = [
    # Types
    "KIND_TO_CHAR",
    "CHAR_TO_KIND",
    "COL_TO_CHAR",
    "CHAR_TO_COL",
    "CASTLING_FLAGS",
    "Color",
    "Kind",
    "Square",
    "Piece",
    "CastlingRights",
    # Errors
    "FenError",
    "FenErrorKind",
    "IncompleteFenError",
    "IllegalInputError",
    "MalformedFieldError",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    # State
    "GameState",
    # Decoders
    "FenTokens",
    "tokenize",
    "decode_placement",
    "decode_rank",
    "decode_active_color",
    "decode_castling",
    "decode_en_passant",
    "decode_half_move_clock",
    "decode_full_move_clock",
    # Parse
    "parse",
    "parse_or_else",
    "parse_or_default",
    # Validate
    "validate_fen",
    # Display
    "board_to_ascii",
    "board_to_unicode",
    # Models
    "SquareModel",
    "PieceModel",
    "SnapshotModel",
]
