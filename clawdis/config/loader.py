"""
配置加载工具模块 (config/loader.py)
=================================
本模块负责 clawdis 配置文件的加载和保存：
- 配置文件默认路径: ~/.clawdis/clawdis.json
- 配置文件使用 camelCase（驼峰命名），Python 内部使用 snake_case（下划线命名）。
  键名映射由 schema.py 中模型的 camelCase 别名完成，只作用于声明的字段；
  agent / session 中未声明的字段及其嵌套内容原样保留
- 加载后根据 identity 推导 inbound 默认值（见 config/defaults.py）

加载失败时抛出 ConfigError 的子类，不会静默回退为默认配置。
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from clawdis.config.defaults import apply_identity_defaults
from clawdis.config.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
)
from clawdis.config.schema import Config
from clawdis.utils.helpers import ensure_dir


def get_config_path() -> Path:
    """获取默认配置文件路径: ~/.clawdis/clawdis.json"""
    return Path.home() / ".clawdis" / "clawdis.json"


def load_config(config_path: Path | str | None = None) -> Config:
    """
    从 JSON 文件加载配置。

    加载流程：
    1. 确定配置文件路径（传入的路径 或 默认路径 ~/.clawdis/clawdis.json）
    2. 读取并解析 JSON 文件内容
    3. 使用 Pydantic 进行类型验证和反序列化（叠加 CLAWDIS_ 环境变量）
    4. 根据 identity 填充 inbound 默认值（apply_identity_defaults）

    参数:
        config_path: 可选的配置文件路径。为 None 时使用默认路径。

    返回:
        Config 配置对象实例

    异常:
        ConfigNotFoundError: 显式指定的文件不存在（默认路径不存在时只使用环境变量）
        ConfigReadError: 文件无法读取
        ConfigParseError: 内容不是合法的 JSON 对象
        ConfigValidationError: 内容不符合配置结构
    """
    if config_path is None:
        path = get_config_path()
        if not path.exists():
            logger.debug(f"No config file at {path}, using environment only")
            return apply_identity_defaults(Config())
    else:
        path = Path(config_path).expanduser()
        if not path.exists():
            logger.error(f"Config file not found: {path}")
            raise ConfigNotFoundError(f"Config file not found: {path}", path)

    data = _strip_settings_controls(_read_json(path), path)

    try:
        config = Config(**data)
    except ValidationError as e:
        logger.error(f"Invalid config in {path}: {e}")
        raise ConfigValidationError(f"Invalid config in {path}: {e}", path) from e

    logger.debug(f"Loaded config from {path}")
    return apply_identity_defaults(config)


def save_config(config: Config, config_path: Path | str | None = None) -> None:
    """
    将配置对象保存为 JSON 文件。

    未设置的字段（None）不会写入文件，保证“保存后再加载”不会凭空多出字段。

    参数:
        config: 要保存的配置对象
        config_path: 可选的保存路径。为 None 时使用默认路径。
    """
    path = Path(config_path).expanduser() if config_path is not None else get_config_path()
    ensure_dir(path.parent)

    # 按 camelCase 别名序列化，extra 字段保持原样
    data = config.model_dump(by_alias=True, exclude_none=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.debug(f"Saved config to {path}")


def _strip_settings_controls(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """
    去掉以下划线开头的顶层键。

    BaseSettings 把 _env_prefix、_cli_parse_args 等关键字参数当作加载控制项，
    配置文件不能借此改变环境变量的读取方式。
    """
    ignored = [k for k in data if k.startswith("_")]
    if ignored:
        logger.warning(f"Ignoring reserved keys in {path}: {', '.join(ignored)}")
    return {k: v for k, v in data.items() if not k.startswith("_")}


def _read_json(path: Path) -> dict[str, Any]:
    """读取 JSON 文件，要求顶层是一个对象。"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse config {path}: {e}")
        raise ConfigParseError(f"Failed to parse config {path}: {e}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read config {path}: {e}")
        raise ConfigReadError(f"Failed to read config {path}: {e}", path) from e

    if not isinstance(data, dict):
        logger.error(f"Config {path} must contain a JSON object, got {type(data).__name__}")
        raise ConfigParseError(
            f"Config {path} must contain a JSON object, got {type(data).__name__}", path
        )
    return data
