"""
配置模块 (config)
================
本模块是 clawdis 的配置系统入口，负责：
1. 定义配置数据模型（schema.py）—— 使用 Pydantic 定义 identity / inbound 的结构
2. 加载/保存配置文件（loader.py）—— 从 JSON 文件读取配置，支持 camelCase ↔ snake_case 自动转换
3. 推导默认值（defaults.py）—— 根据 identity 填充 inbound 中未设置的字段
4. 群聊 @提及 匹配（mentions.py）
"""

from clawdis.config.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
)
from clawdis.config.defaults import apply_identity_defaults, derive_mention_pattern
from clawdis.config.loader import get_config_path, load_config, save_config
from clawdis.config.mentions import compile_mention_patterns, is_mentioned
from clawdis.config.schema import (
    AgentOverride,
    Config,
    GroupChatConfig,
    IdentityConfig,
    InboundConfig,
    SessionConfig,
)

__all__ = [
    "AgentOverride",
    "Config",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigReadError",
    "ConfigValidationError",
    "GroupChatConfig",
    "IdentityConfig",
    "InboundConfig",
    "SessionConfig",
    "apply_identity_defaults",
    "compile_mention_patterns",
    "derive_mention_pattern",
    "get_config_path",
    "is_mentioned",
    "load_config",
    "save_config",
]
