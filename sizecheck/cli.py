"""Size Checker command-line interface.

Usage examples:
    python -m sizecheck check jack
    python -m sizecheck check @jack dril --percentile
    python -m sizecheck check jack --animate --share https://example.com
    python -m sizecheck about
"""

import argparse
import sys
import textwrap
import time

from sizecheck import (
    ABOUT_TEXT,
    PRIVACY_TEXT,
    generate_results,
    is_valid_username,
    loading_steps,
    sanitize_username,
    share_url,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sizecheck",
        description="Scientifically measure a username (a parody).",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Analyse one or more usernames")
    check_p.add_argument("usernames", nargs="+", help="Usernames, with or without @")
    check_p.add_argument(
        "-p", "--percentile",
        action="store_true",
        help="Include the percentile ranking in output",
    )
    check_p.add_argument(
        "-a", "--animate",
        action="store_true",
        help="Play the loading sequence before each result",
    )
    check_p.add_argument(
        "--share",
        metavar="SITE_URL",
        help="Print a share link pointing back at SITE_URL",
    )

    # ── about / privacy ────────────────────────────────────────────────
    sub.add_parser("about", help="What this is")
    sub.add_parser("privacy", help="What happens to your input")

    args = parser.parse_args(argv)

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "about":
        print(textwrap.fill(ABOUT_TEXT, width=72))
        return 0
    if args.command == "privacy":
        print(textwrap.fill(PRIVACY_TEXT, width=72))
        return 0

    parser.print_help()
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    failed = False
    for raw in args.usernames:
        username = sanitize_username(raw)
        if not is_valid_username(username):
            print(f"Error: '{raw}' is not a valid username", file=sys.stderr)
            failed = True
            continue

        if args.animate:
            _animate()

        result = generate_results(username, percentile=args.percentile)
        print(f"  @{username}  {result['size']} {result['unit']}  ({result['confidence']}% confidence)")
        for line in textwrap.wrap(result["description"], width=60):
            print(f"            {line}")

        if result["percentile"] is not None:
            print(f"            Percentile: {result['percentile']}")
        if args.share:
            print(f"            Share: {share_url(username, result, args.share)}")

    return 1 if failed else 0


def _animate() -> None:
    for message, seconds in loading_steps():
        print(f"  ... {message}")
        time.sleep(seconds)


if __name__ == "__main__":
    sys.exit(main())
