"""
型別安全的配置結構定義

使用 dataclass 定義各種配置類型，提供型別安全的配置載入和存取功能。
"""

from dataclasses import dataclass, field
from typing import Dict, Any
from pathlib import Path
from copy import deepcopy
import yaml
import logging
import os
from dotenv import load_dotenv

from schemas.emoji_types import ConvertConfig


@dataclass
class SystemConfig:
    """系統配置"""
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s: %(message)s"


class ConfigurationError(Exception):
    """配置錯誤異常"""
    pass


@dataclass
class AppConfig:
    """應用程式總配置"""
    system: SystemConfig = field(default_factory=SystemConfig)
    convert: ConvertConfig = field(default_factory=ConvertConfig)

    def __post_init__(self):
        """初始化後處理，載入環境變數"""
        # 載入 .env 文件
        load_dotenv()

        log_level = os.getenv('SLACKABET_LOG_LEVEL')
        if log_level:
            self.system.log_level = log_level.upper()

        emoji_set = os.getenv('SLACKABET_EMOJI_SET')
        if emoji_set:
            self.convert.emoji_set = emoji_set

    @classmethod
    def from_yaml(cls, config_path: str) -> 'AppConfig':
        """從 YAML 文件載入配置

        同目錄下的 config-example.yaml 作為預設值，再以指定檔案覆蓋。

        Args:
            config_path: 配置文件路徑

        Returns:
            AppConfig: 配置實例

        Raises:
            ConfigurationError: 配置載入失敗時拋出
        """
        config_file = Path(config_path)
        example_path = config_file.parent / "config-example.yaml"

        default_data: Dict[str, Any] = {}
        if example_path.exists() and example_path != config_file:
            default_data = cls._read_yaml(example_path)
            logging.debug(f"載入預設配置: {example_path}")

        if not config_file.exists():
            logging.warning(f"配置檔案不存在: {config_path}，使用預設配置")
            return cls.from_dict(default_data)

        data = cls._read_yaml(config_file)
        merged_data = cls._deep_merge(default_data, data) if default_data else data
        return cls.from_dict(merged_data)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """讀取 YAML 檔案，頂層必須是字典"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logging.error(f"YAML 格式錯誤: {e}")
            raise ConfigurationError(f"無法載入配置 {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"配置必須是字典格式: {path}")
        return data

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """深度合併兩個字典"""
        result = deepcopy(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = AppConfig._deep_merge(result[key], value)
            else:
                result[key] = deepcopy(value)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """從字典載入配置

        Args:
            data: 配置字典

        Returns:
            AppConfig: 配置實例
        """
        system_data = data.get('system') or {}
        if not isinstance(system_data, dict):
            raise ConfigurationError("system 配置必須是字典格式")
        convert_data = data.get('convert') or {}
        if not isinstance(convert_data, dict):
            raise ConfigurationError("convert 配置必須是字典格式")

        for key in data:
            if key not in ('system', 'convert'):
                logging.warning(f"未知的配置區塊: {key}，跳過")

        system = SystemConfig(**{
            k: v for k, v in system_data.items()
            if k in SystemConfig.__dataclass_fields__
        })
        return cls(system=system, convert=ConvertConfig.from_dict(convert_data))
