"""
工具函数模块 - 提供 clawdis 项目全局通用的辅助函数。

本模块包含：
- ensure_dir：确保目录存在
"""

from clawdis.utils.helpers import ensure_dir

__all__ = ["ensure_dir"]
