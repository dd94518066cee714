"""
轉換錯誤定義

所有轉換失敗皆繼承自 ConversionError，呼叫端可以一次捕捉。
錯誤訊息會原樣顯示給使用者。
"""


class ConversionError(Exception):
    """轉換失敗基礎例外"""
    pass


class NoWordsFound(ConversionError):
    """輸入句子不包含任何單字"""

    def __init__(self):
        super().__init__("plz give at least one word")


class UnsupportedEmojiSet(ConversionError):
    """不支援的 emoji 組"""

    def __init__(self, emoji_set: str):
        self.emoji_set = emoji_set
        super().__init__(f"emoji-set not supported: {emoji_set}")


class UnsupportedColourPattern(ConversionError):
    """不支援的顏色模式"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"colour pattern not supported: {pattern}")


class CapacityExceeded(ConversionError):
    """反應數量已達上限"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"slack won't let you react with more than {limit} emojis :(")


class ColourExhausted(ConversionError):
    """同一字元重複次數超過可用顏色數"""

    def __init__(self, character: str, position: int, limit: int):
        self.character = character
        self.position = position
        self.limit = limit
        super().__init__(
            f'the character "{character}" at position {position} cannot be used more than {limit} times'
        )
