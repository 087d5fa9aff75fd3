"""
工具函数集合 - clawdis 项目全局通用的辅助函数。

函数分类：
- 路径管理：ensure_dir
"""

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """
    确保目录存在，不存在则递归创建。

    参数:
        path: 目标目录路径

    返回:
        创建后的目录路径（原样返回）
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
