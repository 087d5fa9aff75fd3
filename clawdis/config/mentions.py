"""
群聊 @提及 匹配 (config/mentions.py)
==================================
将 inbound.group_chat.mention_patterns 编译为正则，用于判断群聊消息
是否在呼叫机器人。匹配不区分大小写。
"""

import re
from collections.abc import Iterable

from loguru import logger


def compile_mention_patterns(patterns: Iterable[str] | None) -> list[re.Pattern[str]]:
    """
    编译 @提及 正则列表。

    非法的正则会被跳过并记录警告，不影响其他规则生效。

    参数:
        patterns: 正则字符串列表，为 None 时返回空列表

    返回:
        编译后的正则对象列表（保持原顺序）
    """
    compiled: list[re.Pattern[str]] = []
    for pattern in patterns or []:
        try:
            compiled.append(re.compile(pattern, re.IGNORECASE))
        except re.error as e:
            logger.warning(f"Ignoring invalid mention pattern {pattern!r}: {e}")
    return compiled


def is_mentioned(text: str, patterns: Iterable[str] | None) -> bool:
    """判断文本是否命中任意一条 @提及 规则。"""
    return any(p.search(text) for p in compile_mention_patterns(patterns))
