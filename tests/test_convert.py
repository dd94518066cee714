"""
句子轉換整合測試

測試 convert 與 SentenceTransducer 的完整轉換流程。
"""

import logging

import pytest

from emoji_strategy import (
    CapacityExceeded,
    ColourExhausted,
    ConversionError,
    NoWordsFound,
    SentenceTransducer,
    UnsupportedColourPattern,
    UnsupportedEmojiSet,
    build_resolver,
    convert,
    format_emoji,
    split_words,
)
from emoji_strategy.resolvers import TileResolver
from schemas.emoji_types import ConvertConfig


class TestAlphabetConversion:
    """測試 alphabet emoji 組"""

    def test_letter_pattern_with_whitespace_between_words(self):
        config = ConvertConfig(pattern="letter")
        assert convert(config, "test !?#@") == (
            ":alphabet-white-t::alphabet-yellow-e::alphabet-white-s::alphabet-yellow-t:"
            "    "
            ":alphabet-white-exclamation::alphabet-yellow-question:"
            ":alphabet-white-hash::alphabet-yellow-at:"
        )

    def test_word_pattern_with_space_emoji(self):
        config = ConvertConfig(pattern="word", space_emoji="catjam")
        assert convert(config, "te st") == (
            ":alphabet-white-t::alphabet-white-e::catjam::alphabet-yellow-s::alphabet-yellow-t:"
        )

    def test_word_pattern_skips_words_without_output(self):
        config = ConvertConfig(pattern="word", space_emoji="catjam")
        assert convert(config, "a %% b") == (
            ":alphabet-white-a::catjam::alphabet-yellow-b:"
        )

    def test_all_yellow(self):
        config = ConvertConfig(pattern="yellow")
        assert convert(config, "test") == (
            ":alphabet-yellow-t::alphabet-yellow-e::alphabet-yellow-s::alphabet-yellow-t:"
        )

    def test_all_white(self):
        config = ConvertConfig(pattern="white")
        assert convert(config, "test") == (
            ":alphabet-white-t::alphabet-white-e::alphabet-white-s::alphabet-white-t:"
        )

    def test_pattern_aliases(self):
        assert convert(ConvertConfig(pattern="per-letter"), "ab") == (
            ":alphabet-white-a::alphabet-yellow-b:"
        )
        assert convert(ConvertConfig(pattern="fixed-secondary"), "ab") == (
            ":alphabet-yellow-a::alphabet-yellow-b:"
        )

    def test_head_and_tail(self):
        config = ConvertConfig(head_emoji="catjam", tail_emoji=":catjammer:")
        assert convert(config, "a") == ":catjam::alphabet-white-a::catjammer:"

    def test_lowercases_letters(self):
        assert convert(ConvertConfig(), "T") == ":alphabet-white-t:"

    def test_unsupported_symbols_are_ignored(self):
        assert convert(ConvertConfig(), "Â±") == ""

    def test_trailing_unsupported_word_still_gets_separator(self):
        """分隔只在最後一個單字之後省略，與後續單字是否輸出無關"""
        assert convert(ConvertConfig(), "a %") == ":alphabet-white-a:    "

    def test_whitespace_runs_collapse(self):
        assert convert(ConvertConfig(), "  a \t\n b  ") == (
            ":alphabet-white-a:    :alphabet-yellow-b:"
        )


class TestOverrides:
    """測試字元覆寫"""

    def test_overrides_characters(self):
        config = ConvertConfig(overrides={"t": "catjam", "$": "money"})
        assert convert(config, "t$") == ":catjam::money:"

    def test_overrides_do_not_affect_letter_alternation(self):
        config = ConvertConfig(overrides={"b": ":bee:"})
        assert convert(config, "abc") == ":alphabet-white-a::bee::alphabet-yellow-c:"

    def test_uppercase_override_key(self):
        config = ConvertConfig(overrides={"A": "apple"})
        assert convert(config, "a") == ":apple:"

    def test_overrides_apply_to_every_emoji_set(self):
        assert convert(ConvertConfig(emoji_set="tile", overrides={"!": "bang"}), "a!") == (
            ":scrabble-a::bang:"
        )
        assert convert(ConvertConfig(emoji_set="reaction", overrides={"a": "apple"}), "aaa") == (
            ":apple:\n:apple:\n:apple:\n"
        )

    def test_config_is_not_mutated(self):
        config = ConvertConfig(overrides={"T": ":catjam:"}, space_emoji=":x:")
        convert(config, "t t")
        assert config.overrides == {"T": ":catjam:"}
        assert config.space_emoji == ":x:"


class TestTileConversion:
    """測試 tile emoji 組"""

    def test_default_blank_tile_separator(self):
        config = ConvertConfig(emoji_set="tile")
        assert convert(config, "te s%t") == (
            ":scrabble-t::scrabble-e::scrabble-blank::scrabble-s::scrabble-t:"
        )

    def test_explicit_space_emoji(self):
        config = ConvertConfig(emoji_set="scrabble", space_emoji="star")
        assert convert(config, "a b") == ":scrabble-a::star::scrabble-b:"


class TestReactionConversion:
    """測試 reaction emoji 組"""

    def test_each_reaction_on_its_own_line(self):
        config = ConvertConfig(emoji_set="reaction")
        assert convert(config, "hi yo") == (
            ":alphabet-white-h:\n:alphabet-yellow-i:\n"
            ":alphabet-white-y:\n:alphabet-yellow-o:\n"
        )

    def test_reaction_ignores_pattern(self):
        config = ConvertConfig(emoji_set="reaction", pattern="yellow")
        assert convert(config, "ab") == ":alphabet-white-a:\n:alphabet-yellow-b:\n"

    def test_colour_exhausted(self):
        config = ConvertConfig(emoji_set="reaction")
        with pytest.raises(ColourExhausted) as exc_info:
            convert(config, "tttest")
        assert exc_info.value.character == "t"
        assert exc_info.value.position == 3
        assert exc_info.value.limit == 2

    def test_capacity_exceeded(self):
        config = ConvertConfig(emoji_set="reaction")
        sentence = "abcdefghijklmnopqrstuvwxyz"
        with pytest.raises(CapacityExceeded):
            convert(config, sentence)

    def test_exactly_max_reactions_succeeds(self):
        config = ConvertConfig(emoji_set="reaction")
        result = convert(config, "abcdefghijk abcdefghijkl")
        assert result.count("\n") == 23


class TestErrors:
    """測試錯誤處理"""

    @pytest.mark.parametrize("sentence", ["", " ", "\t\n  "])
    def test_no_words(self, sentence):
        with pytest.raises(NoWordsFound) as exc_info:
            convert(ConvertConfig(), sentence)
        assert str(exc_info.value) == "plz give at least one word"

    def test_unsupported_emoji_set(self):
        with pytest.raises(UnsupportedEmojiSet) as exc_info:
            convert(ConvertConfig(emoji_set="runes"), "abc")
        assert exc_info.value.emoji_set == "runes"

    def test_unsupported_pattern(self):
        with pytest.raises(UnsupportedColourPattern):
            convert(ConvertConfig(pattern="rainbow"), "abc")

    def test_all_errors_share_base_class(self):
        for error_type in (NoWordsFound, UnsupportedEmojiSet, CapacityExceeded,
                           ColourExhausted, UnsupportedColourPattern):
            assert issubclass(error_type, ConversionError)

    def test_each_conversion_uses_fresh_state(self):
        config = ConvertConfig(emoji_set="reaction")
        assert convert(config, "tt") == convert(config, "tt")


class TestTransducerHelpers:
    """測試轉換器輔助函數"""

    def test_format_emoji(self):
        assert format_emoji("x") == ":x:"
        assert format_emoji("") == ""

    def test_split_words(self):
        assert split_words(" a  bc\td ") == ["a", "bc", "d"]
        assert split_words("   ") == []

    def test_transducer_with_custom_spacing(self):
        transducer = SentenceTransducer(TileResolver(), default_spacing="_")
        assert transducer.transduce("ab cd") == ":scrabble-a::scrabble-b:_:scrabble-c::scrabble-d:"

    def test_build_resolver_logs(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="emoji_strategy.transducer"):
            build_resolver(ConvertConfig(emoji_set="tile"))
        assert "TileResolver" in caplog.text
