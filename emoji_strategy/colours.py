"""
顏色交替與字元後綴

alphabet 與 reaction 兩種 emoji 組共用的純函式。
"""

from typing import Dict, Optional

from schemas.emoji_types import Colour, ALPHABET_COLOURS


# 標點符號對應的 emoji 名稱
SYMBOL_SUFFIXES: Dict[str, str] = {
    "!": "exclamation",
    "#": "hash",
    "?": "question",
    "@": "at",
}


def colour_for(index: int) -> Colour:
    """依據索引回傳交替的顏色，偶數為白色、奇數為黃色"""
    if index % ALPHABET_COLOURS == 0:
        return Colour.WHITE
    return Colour.YELLOW


def is_ascii_lowercase(char: str) -> bool:
    return len(char) == 1 and "a" <= char <= "z"


def alphabet_suffix(char: str) -> Optional[str]:
    """
    取得字元對應的 emoji 後綴

    Args:
        char: 單一字元（已轉為小寫）

    Returns:
        Optional[str]: 字母本身或符號名稱，不支援的字元回傳 None
    """
    if char in SYMBOL_SUFFIXES:
        return SYMBOL_SUFFIXES[char]
    if is_ascii_lowercase(char):
        return char
    return None
