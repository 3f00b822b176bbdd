"""
中央日志配置

库内统一使用 loguru 的 logger。默认关闭 chessfen 的日志输出，
应用需要时调用 enable_logging() 打开。
"""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

PACKAGE_NAME = "chessfen"

logger.disable(PACKAGE_NAME)


def enable_logging(level: str = "DEBUG", sink: Any = sys.stderr) -> int:
    """打开 chessfen 日志并添加一个输出

    Args:
        level: 最低日志级别
        sink: loguru 接受的任意 sink（文件路径、流、函数）

    Returns:
        handler id，可用于 logger.remove()
    """
    logger.enable(PACKAGE_NAME)
    return logger.add(
        sink,
        level=level,
        filter=PACKAGE_NAME,
        format="{time:HH:mm:ss} | {level} | {name}:{function} - {message}",
    )


def disable_logging() -> None:
    """关闭 chessfen 日志"""
    logger.disable(PACKAGE_NAME)


__all__ = ["logger", "enable_logging", "disable_logging"]
