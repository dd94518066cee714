"""
Emoji 轉換相關的資料類型定義

定義 emoji 組、顏色、交替模式的枚舉，以及單次轉換所需的 ConvertConfig。
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional
import logging


# alphabet emoji 可用的顏色數量
ALPHABET_COLOURS = 2

# 預設單字間隔（四個空白）
DEFAULT_SPACING = "    "

# scrabble 預設的空白方塊
BLANK_TILE_EMOJI = "scrabble-blank"

# Slack 單則訊息允許的反應數量上限
MAX_REACTIONS = 23


class EmojiSet(str, Enum):
    """Emoji 組枚舉"""
    ALPHABET = "alphabet"
    TILE = "tile"
    REACTION = "reaction"

    @property
    def token_prefix(self) -> str:
        """emoji 名稱前綴，reaction 沿用 alphabet 的 emoji"""
        if self is EmojiSet.TILE:
            return "scrabble"
        return "alphabet"

    @classmethod
    def parse(cls, value: Any) -> Optional["EmojiSet"]:
        """解析 emoji 組名稱，無法識別時回傳 None"""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        return _EMOJI_SET_ALIASES.get(name)


_EMOJI_SET_ALIASES: Dict[str, EmojiSet] = {
    "alphabet": EmojiSet.ALPHABET,
    "tile": EmojiSet.TILE,
    "scrabble": EmojiSet.TILE,
    "reaction": EmojiSet.REACTION,
}


class Colour(str, Enum):
    """alphabet emoji 顏色，WHITE 為主色、YELLOW 為副色"""
    WHITE = "white"
    YELLOW = "yellow"


class ColourPattern(str, Enum):
    """顏色交替模式枚舉"""
    LETTER = "letter"
    WORD = "word"
    WHITE = "white"
    YELLOW = "yellow"

    @property
    def fixed_colour(self) -> Optional[Colour]:
        """固定顏色模式對應的顏色，交替模式回傳 None"""
        if self is ColourPattern.WHITE:
            return Colour.WHITE
        if self is ColourPattern.YELLOW:
            return Colour.YELLOW
        return None

    @classmethod
    def parse(cls, value: Any) -> Optional["ColourPattern"]:
        """解析模式名稱，無法識別時回傳 None"""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        return _PATTERN_ALIASES.get(name)


_PATTERN_ALIASES: Dict[str, ColourPattern] = {
    "letter": ColourPattern.LETTER,
    "per-letter": ColourPattern.LETTER,
    "word": ColourPattern.WORD,
    "per-word": ColourPattern.WORD,
    "white": ColourPattern.WHITE,
    "fixed-primary": ColourPattern.WHITE,
    "yellow": ColourPattern.YELLOW,
    "fixed-secondary": ColourPattern.YELLOW,
}


def trim_emoji(emoji: Optional[str]) -> str:
    """移除 emoji 名稱前後各一個冒號，例如 ':catjam:' -> 'catjam'"""
    if not emoji:
        return ""
    return emoji.removesuffix(":").removeprefix(":")


def build_override_table(overrides: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    """
    建立不可變的字元覆寫表

    Args:
        overrides: 使用者提供的 {字元: emoji} 對應

    Returns:
        Mapping[str, str]: 鍵轉為小寫、值移除冒號後的唯讀對應
    """
    table: Dict[str, str] = {}
    for key, value in (overrides or {}).items():
        if value is None:
            logging.getLogger(__name__).warning(f"字元 {key!r} 的覆寫 emoji 為空值，跳過")
            continue
        table[str(key).lower()] = trim_emoji(str(value))
    return MappingProxyType(table)


@dataclass
class ConvertConfig:
    """
    單次轉換配置

    Attributes:
        emoji_set: emoji 組名稱（alphabet / tile / reaction）
        pattern: alphabet 的顏色交替模式
        overrides: 字元覆寫 {字元: emoji}
        space_emoji: 單字間的 emoji，空字串表示未設定
        head_emoji: 句首 emoji
        tail_emoji: 句尾 emoji
        default_spacing: 未設定 space_emoji 時的單字間隔
    """
    emoji_set: str = EmojiSet.ALPHABET.value
    pattern: str = ColourPattern.LETTER.value
    overrides: Dict[str, str] = field(default_factory=dict)
    space_emoji: str = ""
    head_emoji: str = ""
    tail_emoji: str = ""
    default_spacing: str = DEFAULT_SPACING

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ConvertConfig":
        """從字典建立配置，忽略未知欄位"""
        logger = logging.getLogger(__name__)
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                logger.warning(f"未知的轉換配置欄位: {key}，跳過")
                continue
            if value is None:
                continue
            if key == "overrides":
                if not isinstance(value, dict):
                    logger.warning(f"覆寫配置必須是字典格式: {value!r}，跳過")
                    continue
                values[key] = dict(value)
            elif isinstance(value, (dict, list)):
                logger.warning(f"轉換配置欄位 {key} 必須是字串: {value!r}，跳過")
            else:
                # YAML 的數字等純量一律轉為字串
                values[key] = str(value)
        return cls(**values)

    def normalized(self) -> "ConvertConfig":
        """回傳 space/head/tail emoji 已移除冒號的副本"""
        return replace(
            self,
            overrides=dict(self.overrides),
            space_emoji=trim_emoji(self.space_emoji),
            head_emoji=trim_emoji(self.head_emoji),
            tail_emoji=trim_emoji(self.tail_emoji),
        )
