"""
clawdis - 聊天机器人配置加载器

模块概述：
    本文件是 clawdis 包的入口文件（__init__.py），定义了包的元信息。
    clawdis 负责读取 ~/.clawdis/clawdis.json，并根据机器人的身份（identity）
    为入站消息行为（inbound）推导合理的默认值：
    - 回复前缀（responsePrefix）默认使用身份表情符号
    - 群聊 @提及 匹配规则（mentionPatterns）默认由身份名称生成
"""

# 版本号，遵循语义化版本规范（主版本.次版本.修订号）
__version__ = "0.1.0"

# 项目 logo 表情符号
__logo__ = "🦞"
