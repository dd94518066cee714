# Slack emoji 轉換策略模組

from .errors import (
    ConversionError,
    NoWordsFound,
    UnsupportedEmojiSet,
    UnsupportedColourPattern,
    CapacityExceeded,
    ColourExhausted,
)

from .colours import colour_for, alphabet_suffix

from .resolvers import (
    EmojiResolver,
    AlphabetResolver,
    TileResolver,
    ReactionResolver,
)

from .override import OverrideResolver

from .transducer import (
    SentenceTransducer,
    build_resolver,
    convert,
    format_emoji,
    split_words,
)

__all__ = [
    # Errors
    "ConversionError",
    "NoWordsFound",
    "UnsupportedEmojiSet",
    "UnsupportedColourPattern",
    "CapacityExceeded",
    "ColourExhausted",
    # Colours
    "colour_for",
    "alphabet_suffix",
    # Resolvers
    "EmojiResolver",
    "AlphabetResolver",
    "TileResolver",
    "ReactionResolver",
    "OverrideResolver",
    # Transducer
    "SentenceTransducer",
    "build_resolver",
    "convert",
    "format_emoji",
    "split_words",
]
