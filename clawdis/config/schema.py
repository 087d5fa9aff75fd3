"""
配置数据模型定义 (config/schema.py)
=================================
本模块使用 Pydantic 定义 clawdis 的配置结构。

与“所有配置项都有默认值”的做法不同，这里的字段默认一律为 None，
表示“配置文件中未设置”。是否填充默认值由 config/defaults.py 根据
identity 决定，这样才能区分“未设置”和“显式设置为空字符串”。

整体配置结构（树形）：
Config (根配置)
├── identity      - 机器人身份（名称、主题、表情符号）
└── inbound       - 入站消息行为
    ├── responsePrefix       - 回复前缀
    ├── groupChat            - 群聊配置（mentionPatterns 等）
    ├── agent                - Agent 代理覆盖（provider/model/baseUrl/apiKeyEnv）
    ├── session              - 会话配置（原样透传）
    └── allowFrom            - 发送者白名单
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict


# ==============================================================================
# 公共基类
# ==============================================================================


class Base(BaseModel):
    """
    嵌套配置模型的基类。

    声明的字段在 JSON 中使用 camelCase 别名（如 responsePrefix），Python 中使用
    snake_case；两种写法加载时都接受。未声明的字段（extra）不做任何改名。
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ==============================================================================
# 身份配置
# ==============================================================================


class IdentityConfig(Base):
    """机器人身份。name 用于生成 @提及 规则，emoji 用作默认回复前缀。"""
    name: str | None = None  # 显示名称，如 "Samantha"
    theme: str | None = None  # 人设主题描述（自由文本，不参与推导）
    emoji: str | None = None  # 身份表情符号，如 "🦥"


# ==============================================================================
# 入站消息配置
# ==============================================================================


class GroupChatConfig(Base):
    """群聊行为配置。"""
    mention_patterns: list[str] | None = None  # @提及 正则列表（按顺序匹配）
    history_limit: int | None = None  # 群聊上下文保留的最近消息条数


class AgentOverride(Base):
    """
    Agent 代理覆盖配置。

    所有字段都是不透明字符串，原样透传给下游；未声明的字段同样保留
    （extra="allow"），键名和嵌套内容都不做转换，保存配置时原样写回。
    """
    model_config = ConfigDict(extra="allow")

    provider: str | None = None  # LLM 提供商，如 "anthropic"
    model: str | None = None  # 模型名称，如 "claude-opus-4-5"
    base_url: str | None = None  # 代理地址，如 "https://proxy.example.com"
    api_key_env: str | None = None  # 存放 API Key 的环境变量名

    def resolve_api_key(self, environ: Mapping[str, str] | None = None) -> str | None:
        """
        从环境变量中读取 API Key。

        参数:
            environ: 环境变量映射，为 None 时使用 os.environ

        返回:
            环境变量的值；未配置 api_key_env 或变量未设置时返回 None
        """
        if not self.api_key_env:
            return None
        env = os.environ if environ is None else environ
        return env.get(self.api_key_env) or None


class SessionConfig(Base):
    """会话配置。结构不做约束，未知字段（包括其嵌套内容）原样保留。"""
    model_config = ConfigDict(extra="allow")

    scope: str | None = None  # 会话范围: "per-sender" | "global"
    idle_minutes: int | None = None  # 空闲多少分钟后开启新会话
    reset_triggers: list[str] | None = None  # 触发会话重置的指令，如 ["/new"]
    store: str | None = None  # 会话存储文件路径


class InboundConfig(Base):
    """入站消息行为配置。每个字段为 None 表示配置文件中未设置。"""
    response_prefix: str | None = None  # 回复前缀（默认取 identity.emoji）
    group_chat: GroupChatConfig | None = None  # 群聊配置
    agent: AgentOverride | None = None  # Agent 代理覆盖（不会被自动生成）
    session: SessionConfig | None = None  # 会话配置（不会被自动生成）
    allow_from: list[str] | None = None  # 允许的发送者白名单

    @property
    def mention_patterns(self) -> list[str] | None:
        """群聊 @提及 正则列表的快捷访问。"""
        return self.group_chat.mention_patterns if self.group_chat else None


# ==============================================================================
# 根配置类
# ==============================================================================


class Config(BaseSettings):
    """
    clawdis 根配置类。

    继承自 Pydantic 的 BaseSettings，除了从 JSON 文件加载外，
    还支持从环境变量覆盖配置：
    - 环境变量前缀: CLAWDIS_
    - 嵌套分隔符: __ (双下划线)
    - 示例: CLAWDIS_INBOUND__RESPONSE_PREFIX=">" 可设置 inbound.response_prefix

    配置文件中的值优先于环境变量。根配置本身不设置别名：identity / inbound
    两个字段名没有大小写差异，且带别名的字段不会应用 env_prefix。
    """
    identity: IdentityConfig | None = None  # 机器人身份
    inbound: InboundConfig | None = None  # 入站消息行为

    # 支持 CLAWDIS_ 前缀的环境变量，嵌套用 __ 分隔；忽略未知的顶层字段
    model_config = SettingsConfigDict(
        env_prefix="CLAWDIS_",
        env_nested_delimiter="__",
        extra="ignore",
    )
