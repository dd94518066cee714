"""
句子轉換器

將句子逐字、逐單字交給解析器處理，並組合為可直接貼上的 emoji 字串。
"""

from typing import List
import logging
import re

from schemas.emoji_types import (
    BLANK_TILE_EMOJI,
    DEFAULT_SPACING,
    ColourPattern,
    ConvertConfig,
    EmojiSet,
    build_override_table,
)
from .errors import NoWordsFound, UnsupportedColourPattern, UnsupportedEmojiSet
from .override import OverrideResolver
from .resolvers import AlphabetResolver, EmojiResolver, ReactionResolver, TileResolver


logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\S+")


def split_words(sentence: str) -> List[str]:
    """以空白切分單字"""
    return _WORD_RE.findall(sentence)


def format_emoji(token: str) -> str:
    """以冒號包裝 emoji 名稱，空字串不輸出"""
    if not token:
        return ""
    return f":{token}:"


def normalize_char(char: str) -> str:
    """只將 ASCII 大寫字母轉為小寫"""
    if "A" <= char <= "Z":
        return char.lower()
    return char


class SentenceTransducer:
    """句子轉換器

    每次轉換都應使用新的解析器實例，解析器狀態不跨轉換保留。
    """

    def __init__(
        self,
        resolver: EmojiResolver,
        space_emoji: str = "",
        head_emoji: str = "",
        tail_emoji: str = "",
        default_spacing: str = DEFAULT_SPACING,
    ):
        self.resolver = resolver
        self.space_emoji = space_emoji
        self.head_emoji = head_emoji
        self.tail_emoji = tail_emoji
        self.default_spacing = default_spacing

    def transduce(self, sentence: str) -> str:
        """
        轉換句子

        Args:
            sentence: 已合併的完整句子

        Returns:
            str: emoji 字串

        Raises:
            NoWordsFound: 句子只有空白
            ConversionError: 解析器回報的錯誤，不會回傳部分結果
        """
        words = split_words(sentence)
        if not words:
            raise NoWordsFound()

        parts: List[str] = [format_emoji(self.head_emoji)]
        last_index = len(words) - 1

        for index, word in enumerate(words):
            committed = False
            for raw_char in word:
                token = self.resolver.resolve(normalize_char(raw_char))
                if not token:
                    continue
                parts.append(format_emoji(token))
                parts.append(self.resolver.character_separator)
                self.resolver.on_character_committed()
                committed = True

            if not committed or index == last_index:
                continue

            if self.space_emoji:
                parts.append(format_emoji(self.space_emoji))
            else:
                parts.append(self.default_spacing)
            self.resolver.on_word_committed()

        parts.append(format_emoji(self.tail_emoji))
        result = "".join(parts)
        logger.debug(f"轉換完成: {len(words)} 個單字，輸出 {len(result)} 個字元")
        return result


def build_resolver(config: ConvertConfig) -> EmojiResolver:
    """
    依配置建立解析器，並以覆寫層包裝

    Args:
        config: 轉換配置

    Returns:
        EmojiResolver: 新的解析器實例

    Raises:
        UnsupportedEmojiSet: 不支援的 emoji 組
        UnsupportedColourPattern: alphabet 使用了不支援的顏色模式
    """
    emoji_set = EmojiSet.parse(config.emoji_set)
    if emoji_set is None:
        raise UnsupportedEmojiSet(str(config.emoji_set))

    resolver: EmojiResolver
    if emoji_set is EmojiSet.ALPHABET:
        pattern = ColourPattern.parse(config.pattern)
        if pattern is None:
            raise UnsupportedColourPattern(str(config.pattern))
        resolver = AlphabetResolver(pattern)
    elif emoji_set is EmojiSet.TILE:
        resolver = TileResolver()
    else:
        resolver = ReactionResolver()

    logger.debug(f"已建立 {type(resolver).__name__}，覆寫 {len(config.overrides)} 個字元")
    return OverrideResolver(resolver, build_override_table(config.overrides))


def convert(config: ConvertConfig, sentence: str) -> str:
    """
    將句子轉換為 emoji 字串

    Args:
        config: 轉換配置，不會被修改
        sentence: 已合併的完整句子

    Returns:
        str: 以 `:emoji:` 格式組成的字串

    Raises:
        ConversionError: 任何轉換失敗
    """
    if not split_words(sentence):
        raise NoWordsFound()

    config = config.normalized()
    resolver = build_resolver(config)

    emoji_set = EmojiSet.parse(config.emoji_set)
    space_emoji = config.space_emoji
    default_spacing = config.default_spacing
    if emoji_set is EmojiSet.TILE and not space_emoji:
        space_emoji = BLANK_TILE_EMOJI
    elif emoji_set is EmojiSet.REACTION:
        default_spacing = ""

    transducer = SentenceTransducer(
        resolver,
        space_emoji=space_emoji,
        head_emoji=config.head_emoji,
        tail_emoji=config.tail_emoji,
        default_spacing=default_spacing,
    )
    return transducer.transduce(sentence)
