"""
配置错误类型 (config/errors.py)
=============================
加载配置失败时抛出的异常层级。所有异常都继承自 ConfigError，
调用方可以统一捕获 ConfigError，也可以按具体原因分别处理。

ConfigError
├── ConfigNotFoundError    - 显式指定的配置文件不存在
├── ConfigReadError        - 文件存在但无法读取（权限、是目录等）
├── ConfigParseError       - 内容不是合法的 JSON 对象
└── ConfigValidationError  - JSON 合法但不符合配置结构
"""

from pathlib import Path


class ConfigError(Exception):
    """配置错误基类，记录出错的配置文件路径。"""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ConfigError):
    """配置文件不存在。"""


class ConfigReadError(ConfigError):
    """配置文件无法读取。"""


class ConfigParseError(ConfigError):
    """配置文件不是合法的 JSON 对象。"""


class ConfigValidationError(ConfigError):
    """配置内容不符合 Config 结构。"""
