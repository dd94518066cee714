#!/usr/bin/env python3
"""
slackabet 命令行介面

將句子轉換為 Slack emoji 字串並輸出到終端機，支援單次轉換與互動模式。
"""

import argparse
import logging
import sys
from dataclasses import asdict, replace
from typing import Dict, List, Optional

from emoji_strategy import ConversionError, convert
from schemas.config_types import AppConfig
from schemas.emoji_types import ConvertConfig
from utils.config_loader import load_typed_config
from utils.logger import setup_logger


def _parse_override(value: str) -> Dict[str, str]:
    """解析 KEY=VALUE 形式的覆寫參數"""
    key, sep, emoji = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"覆寫格式應為 KEY=VALUE: {value}")
    return {key: emoji}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slackabet",
        description="Annoy your coworkers with emoji messages in Slack",
    )
    parser.add_argument(
        "sentence", nargs="*",
        help="要轉換的句子，字母不分大小寫，單字間預設以 4 個空白分隔",
    )
    parser.add_argument(
        "-e", "--emoji-set", dest="emoji_set",
        help="emoji 組：alphabet、tile（scrabble）或 reaction",
    )
    parser.add_argument(
        "-p", "--pattern",
        help="alphabet 的顏色模式：letter、word、yellow、white",
    )
    parser.add_argument(
        "-o", "--override", dest="overrides", action="append", type=_parse_override, default=[],
        help="覆寫特定字元的 emoji（例如 4=four），可重複使用",
    )
    parser.add_argument("--space", dest="space_emoji", help="取代空白的單字分隔 emoji")
    parser.add_argument("--head", dest="head_emoji", help="句首 emoji")
    parser.add_argument("--tail", dest="tail_emoji", help="句尾 emoji")
    parser.add_argument("-c", "--config", default="config.yaml", help="配置檔案路徑")
    parser.add_argument("-i", "--interactive", action="store_true", help="進入互動模式")
    return parser


def merge_cli_options(base: ConvertConfig, args: argparse.Namespace) -> ConvertConfig:
    """以命令列參數覆蓋配置檔案中的轉換設定"""
    overrides = dict(base.overrides)
    for entry in args.overrides:
        overrides.update(entry)

    changes = {"overrides": overrides}
    for name in ("emoji_set", "pattern", "space_emoji", "head_emoji", "tail_emoji"):
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    return replace(base, **changes)


class CLIInterface:
    """命令行介面"""

    def __init__(self, config: Optional[AppConfig] = None):
        """初始化 CLI 介面

        Args:
            config: 型別安全的配置實例
        """
        self.config = config or load_typed_config()
        setup_logger(asdict(self.config.system))
        self.logger = logging.getLogger(__name__)

    def show_config_info(self):
        """顯示配置資訊"""
        convert_config = self.config.convert
        print("=" * 50)
        print("🔧 slackabet 配置資訊")
        print("=" * 50)
        print(f"  emoji 組: {convert_config.emoji_set}")
        print(f"  顏色模式: {convert_config.pattern}")
        print(f"  單字分隔: {convert_config.space_emoji or '(空白)'}")
        print(f"  句首: {convert_config.head_emoji or '(無)'}")
        print(f"  句尾: {convert_config.tail_emoji or '(無)'}")
        if convert_config.overrides:
            print("\n🔁 字元覆寫:")
            for key, emoji in convert_config.overrides.items():
                print(f"  {key} → {emoji}")
        print("=" * 50)

    def convert_sentence(self, sentence: str) -> str:
        """以目前配置轉換句子"""
        return convert(self.config.convert, sentence)

    def start_conversion_loop(self):
        """互動轉換模式"""
        print("\n💬 互動模式已啟動")
        print("輸入 'quit' 或 'exit' 退出")
        print("輸入 'config' 查看當前配置")
        print("-" * 50)

        while True:
            try:
                user_input = input("\n✏️  句子: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\n👋 結束")
                break

            if not user_input:
                continue

            if user_input.lower() in ['quit', 'exit', '退出']:
                print("👋 結束")
                break

            if user_input.lower() == 'config':
                self.show_config_info()
                continue

            try:
                print(self.convert_sentence(user_input))
            except ConversionError as e:
                print(f"❌ {e}")
                self.logger.info(f"轉換失敗: {e}")


def main(argv: Optional[List[str]] = None) -> int:
    """主程式入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interactive and not args.sentence:
        parser.error("請提供要轉換的句子，或使用 --interactive")
    if args.interactive and args.sentence:
        parser.error("互動模式不接受句子參數")

    try:
        config = load_typed_config(args.config, force_reload=True)
        config.convert = merge_cli_options(config.convert, args)
        cli = CLIInterface(config)

        if args.interactive:
            cli.start_conversion_loop()
            return 0

        print(cli.convert_sentence(" ".join(args.sentence)))
        return 0

    except ConversionError as e:
        logging.error(f"轉換失敗: {e}")
        print(f"❌ converting sentence: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
