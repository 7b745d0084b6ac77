import argparse
import sys
from typing import List, Optional

from rapidadd._utils import local_now
from rapidadd.config import AppConfig, ConfigError, load_config
from rapidadd.daily import append_entry, daily_file_path, format_entry, read_daily


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rapidadd",
        description="Quickly add to the end of a daily file, or print its content.",
    )
    parser.add_argument(
        "entry",
        nargs="*",
        help="The text that will be appended to the end of your daily file.",
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_true",
        help="Prints the content of the daily file.",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.print and args.entry:
        parser.error("argument -p/--print: not allowed with argument entry")
    if not args.print and not args.entry:
        parser.error("The following required arguments were not provided:\n  <entry>...")
    return args


def print_daily(config: AppConfig) -> None:
    path = daily_file_path(config)
    try:
        contents = read_daily(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Failed to read the daily file: {exc}", file=sys.stderr)
        sys.exit(1)
    print(contents)


def add_entry(config: AppConfig, tokens: List[str]) -> None:
    now = local_now()
    line = format_entry(" ".join(tokens), now)
    path = daily_file_path(config, now.date())
    try:
        append_entry(path, line)
    except OSError as exc:
        print(f"Failed to append to the daily file: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Entry added to {path}")


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        config = load_config()
    except ConfigError as exc:
        print(f"Failed to load config: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.print:
        print_daily(config)
    else:
        add_entry(config, args.entry)


if __name__ == "__main__":
    main()
