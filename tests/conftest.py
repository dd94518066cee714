import logging

import pytest

from utils.config_loader import clear_config_cache


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """避免外部環境變數、配置快取與 logging 設定影響其他測試"""
    monkeypatch.delenv("SLACKABET_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SLACKABET_EMOJI_SET", raising=False)
    clear_config_cache()

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    clear_config_cache()
