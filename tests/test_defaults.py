"""defaults 模块单元测试。"""

import re

from clawdis.config.defaults import apply_identity_defaults, derive_mention_pattern, escape_regex
from clawdis.config.schema import AgentOverride, Config, IdentityConfig, InboundConfig


def test_derive_mention_pattern_plain_name():
    assert derive_mention_pattern("Samantha") == "\\b@?Samantha\\b"


def test_derive_mention_pattern_keeps_spaces():
    assert derive_mention_pattern("Samantha Sloth") == "\\b@?Samantha Sloth\\b"


def test_escape_regex_escapes_metacharacters():
    assert escape_regex("C3.PO (v2)") == r"C3\.PO \(v2\)"
    assert escape_regex("a+b*c?") == r"a\+b\*c\?"
    assert escape_regex("@bot") == "@bot"


def test_derived_pattern_matches_whole_word_with_optional_at():
    pattern = re.compile(derive_mention_pattern("Samantha"), re.IGNORECASE)

    assert pattern.search("hey @Samantha, what's up")
    assert pattern.search("samantha help")
    assert not pattern.search("Samanthas are great")


def test_escaped_name_matches_literally():
    pattern = re.compile(derive_mention_pattern("R2.D2"))

    assert pattern.search("ping R2.D2 now")
    assert not pattern.search("ping R2xD2 now")


def test_without_identity_returns_same_object():
    cfg = Config(inbound=InboundConfig(response_prefix=None))

    assert apply_identity_defaults(cfg) is cfg


def test_input_is_not_mutated():
    cfg = Config(identity=IdentityConfig(name="Samantha", emoji="🦥"), inbound=InboundConfig())

    result = apply_identity_defaults(cfg)

    assert result.inbound.response_prefix == "🦥"
    assert cfg.inbound.response_prefix is None
    assert cfg.inbound.group_chat is None


def test_missing_emoji_leaves_prefix_unset():
    cfg = Config(identity=IdentityConfig(name="Samantha"), inbound=InboundConfig())

    result = apply_identity_defaults(cfg)

    assert result.inbound.response_prefix is None
    assert result.inbound.mention_patterns == [r"\b@?Samantha\b"]


def test_empty_emoji_becomes_empty_prefix():
    cfg = Config(identity=IdentityConfig(name="Samantha", emoji=""), inbound=InboundConfig())

    result = apply_identity_defaults(cfg)

    assert result.inbound.response_prefix == ""


def test_empty_name_leaves_patterns_unset():
    cfg = Config(identity=IdentityConfig(name="", emoji="🦥"), inbound=InboundConfig())

    result = apply_identity_defaults(cfg)

    assert result.inbound.response_prefix == "🦥"
    assert result.inbound.group_chat is None


def test_name_is_used_without_stripping():
    cfg = Config(identity=IdentityConfig(name=" Samantha ", emoji="🦥"), inbound=InboundConfig())

    result = apply_identity_defaults(cfg)

    assert result.inbound.mention_patterns == [r"\b@? Samantha \b"]


def test_agent_passes_through_unchanged():
    agent = AgentOverride(provider="anthropic", model="claude-opus-4-5")
    cfg = Config(identity=IdentityConfig(name="Samantha", emoji="🦥"), inbound=InboundConfig(agent=agent))

    result = apply_identity_defaults(cfg)

    assert result.inbound.agent == agent
    assert result.inbound.session is None
