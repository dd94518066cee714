"""
字元覆寫層

包裝任一解析器，覆寫表中的字元直接回傳指定 emoji，
不經過內部解析器，也不影響其顏色交替或反應計數。
"""

from typing import Mapping

from .resolvers import EmojiResolver


class OverrideResolver(EmojiResolver):
    """覆寫解析器（裝飾器）"""

    def __init__(self, inner: EmojiResolver, overrides: Mapping[str, str]):
        """
        Args:
            inner: 被包裝的解析器
            overrides: 已正規化的唯讀覆寫表
        """
        self.inner = inner
        self.overrides = overrides
        self.character_separator = inner.character_separator
        self._last_overridden = False
        # 目前單字中是否有字元由內部解析器輸出
        self._inner_committed_in_word = False

    def resolve(self, char: str) -> str:
        key = char.lower()
        if key in self.overrides:
            self._last_overridden = True
            return self.overrides[key]
        self._last_overridden = False
        return self.inner.resolve(char)

    def on_character_committed(self) -> None:
        if self._last_overridden:
            return
        self._inner_committed_in_word = True
        self.inner.on_character_committed()

    def on_word_committed(self) -> None:
        # 只由覆寫字元組成的單字不推進內部的單字計數
        if self._inner_committed_in_word:
            self.inner.on_word_committed()
        self._inner_committed_in_word = False
