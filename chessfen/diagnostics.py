"""可恢复异常的诊断信息

解析过程中遇到的可恢复问题（行尾多余字符、无法识别的字符）不会中断解析，
而是写入调用方提供的 sink，同时记录到 DEBUG 日志。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chessfen.logging import logger


@dataclass(frozen=True)
class Diagnostic:
    """单条诊断信息"""

    row: int
    message: str
    char: str | None = None  # 触发诊断的字符


class DiagnosticSink(Protocol):
    """诊断信息接收方，list[Diagnostic] 即满足"""

    def append(self, diagnostic: Diagnostic, /) -> None: ...


def report(sink: DiagnosticSink | None, diagnostic: Diagnostic) -> None:
    """记录一条诊断信息"""
    logger.debug(f"row {diagnostic.row}: {diagnostic.message}")
    if sink is not None:
        sink.append(diagnostic)
