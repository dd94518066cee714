"""
配置載入器

負責載入和快取型別安全的 AppConfig。
"""

import logging
from typing import Optional

from schemas.config_types import AppConfig, ConfigurationError


# 全域配置快取
_config_cache: Optional[AppConfig] = None
_config_path_cache: Optional[str] = None


def load_typed_config(config_path: str = "config.yaml", force_reload: bool = False) -> AppConfig:
    """載入型別安全的配置

    Args:
        config_path: 配置檔案路徑
        force_reload: 是否強制重新載入

    Returns:
        AppConfig: 型別安全的配置實例，載入失敗時返回預設配置
    """
    global _config_cache, _config_path_cache

    # 檢查快取
    if (not force_reload and
        _config_cache is not None and
        _config_path_cache == config_path):
        return _config_cache

    try:
        config = AppConfig.from_yaml(config_path)
        logging.info(f"型別安全配置載入成功: {config_path}")
    except ConfigurationError as e:
        logging.error(f"載入型別安全配置失敗: {e}，使用預設配置")
        config = AppConfig()

    # 快取配置
    _config_cache = config
    _config_path_cache = config_path
    return config


def clear_config_cache():
    """清除配置快取"""
    global _config_cache, _config_path_cache
    _config_cache = None
    _config_path_cache = None
