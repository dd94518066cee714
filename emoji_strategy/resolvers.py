"""
Emoji 解析器

將單一字元解析為 emoji 名稱的策略實作。每個解析器實例只服務一次轉換，
內部計數器在轉換期間只增不減。
"""

from abc import ABC, abstractmethod
from typing import Dict, Set
import logging

from schemas.emoji_types import (
    ALPHABET_COLOURS,
    MAX_REACTIONS,
    Colour,
    ColourPattern,
    EmojiSet,
)
from .colours import alphabet_suffix, colour_for, is_ascii_lowercase
from .errors import CapacityExceeded, ColourExhausted


logger = logging.getLogger(__name__)


class EmojiResolver(ABC):
    """Emoji 解析器介面

    轉換器對每個字元呼叫 resolve，只有在實際輸出 emoji 後才會呼叫
    on_character_committed；每個單字間隔輸出後呼叫 on_word_committed。
    """

    # 每個輸出的 emoji 之後附加的文字
    character_separator: str = ""

    @abstractmethod
    def resolve(self, char: str) -> str:
        """解析字元

        Args:
            char: 單一字元（ASCII 大寫已轉小寫）

        Returns:
            str: emoji 名稱（不含冒號），空字串表示不輸出
        """
        pass

    def on_character_committed(self) -> None:
        """字元已輸出"""
        pass

    def on_word_committed(self) -> None:
        """單字間隔已輸出"""
        pass


class AlphabetResolver(EmojiResolver):
    """alphabet emoji 解析器，支援逐字母、逐單字或固定顏色"""

    def __init__(self, pattern: ColourPattern):
        self.pattern = pattern
        self.written_letters = 0
        self.written_words = 0

    def current_colour(self) -> Colour:
        if self.pattern is ColourPattern.LETTER:
            return colour_for(self.written_letters)
        if self.pattern is ColourPattern.WORD:
            return colour_for(self.written_words)
        return self.pattern.fixed_colour

    def resolve(self, char: str) -> str:
        suffix = alphabet_suffix(char)
        if suffix is None:
            return ""
        prefix = EmojiSet.ALPHABET.token_prefix
        return f"{prefix}-{self.current_colour().value}-{suffix}"

    def on_character_committed(self) -> None:
        self.written_letters += 1

    def on_word_committed(self) -> None:
        self.written_words += 1


class TileResolver(EmojiResolver):
    """scrabble 方塊解析器，只支援英文字母"""

    def resolve(self, char: str) -> str:
        if not is_ascii_lowercase(char):
            return ""
        return f"{EmojiSet.TILE.token_prefix}-{char}"


class ReactionResolver(EmojiResolver):
    """
    反應解析器

    用於逐一貼上為訊息反應：同一則訊息不能出現重複的反應，
    因此同一字母的每次出現都必須使用尚未用過的顏色，且總數受限。
    每個 emoji 各佔一行，方便連續貼到反應搜尋框。
    """

    character_separator = "\n"

    def __init__(self, max_reactions: int = MAX_REACTIONS):
        self.max_reactions = max_reactions
        self.written = 0
        self.used: Dict[str, Set[Colour]] = {}

    def resolve(self, char: str) -> str:
        if self.written >= self.max_reactions:
            raise CapacityExceeded(self.max_reactions)

        suffix = alphabet_suffix(char)
        if suffix is None:
            return ""

        used = self.used.setdefault(suffix, set())
        # 從目前位置往後找第一個此字母尚未使用的顏色
        for offset in range(ALPHABET_COLOURS):
            colour = colour_for(self.written + offset)
            if colour in used:
                continue
            used.add(colour)
            return f"{EmojiSet.REACTION.token_prefix}-{colour.value}-{suffix}"

        logger.debug(f"字元 {char!r} 的顏色已用盡: {sorted(c.value for c in used)}")
        raise ColourExhausted(char, self.written + 1, ALPHABET_COLOURS)

    def on_character_committed(self) -> None:
        self.written += 1
