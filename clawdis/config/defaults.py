"""
身份默认值推导 (config/defaults.py)
=================================
根据 identity 为 inbound 中未设置的字段填充默认值：

- inbound.response_prefix 未设置 → 使用 identity.emoji
- inbound.group_chat.mention_patterns 未设置 → 由 identity.name 生成一条正则，
  匹配完整单词形式的名称，名称前可带 "@"（如 "\\b@?Samantha\\b"）

规则：
1. 只有“未设置”（None）的字段才会被填充，显式值（包括空字符串）永远优先
2. 只处理上述两个叶子字段，agent / session 等字段绝不会被凭空生成
3. 没有 identity 时不做任何推导，配置原样返回
"""

import re

from loguru import logger

from clawdis.config.schema import Config, GroupChatConfig, InboundConfig

# 需要转义的正则元字符（空格和 "@" 不转义，保持生成的规则可读）
_REGEX_SPECIALS = re.compile(r"[.*+?^${}()|[\]\\]")


def escape_regex(text: str) -> str:
    """转义正则元字符，使文本在正则中按字面匹配。"""
    return _REGEX_SPECIALS.sub(lambda m: "\\" + m.group(0), text)


def derive_mention_pattern(name: str) -> str:
    """
    由身份名称生成群聊 @提及 正则。

    例: "Samantha" → "\\b@?Samantha\\b"
    """
    return rf"\b@?{escape_regex(name)}\b"


def apply_identity_defaults(config: Config) -> Config:
    """
    根据 identity 为 inbound 填充默认值。

    输入配置不会被修改，返回的是一个新的 Config 对象。

    参数:
        config: 从配置文件加载的原始配置

    返回:
        填充默认值后的配置
    """
    identity = config.identity
    if identity is None:
        return config

    inbound = config.inbound or InboundConfig()
    updates: dict = {}

    if inbound.response_prefix is None and identity.emoji is not None:
        updates["response_prefix"] = identity.emoji
        logger.debug(f"Defaulted inbound.responsePrefix to identity emoji {identity.emoji!r}")

    # 空名称生成的 \b@?\b 几乎匹配任何消息，不作为默认值
    name = identity.name
    group_chat = inbound.group_chat or GroupChatConfig()
    if group_chat.mention_patterns is None and name:
        pattern = derive_mention_pattern(name)
        updates["group_chat"] = group_chat.model_copy(update={"mention_patterns": [pattern]})
        logger.debug(f"Defaulted inbound.groupChat.mentionPatterns to [{pattern!r}]")

    if not updates:
        return config
    return config.model_copy(update={"inbound": inbound.model_copy(update=updates)})
