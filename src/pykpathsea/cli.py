#!/usr/bin/env python3
"""
pykpathsea CLI - Find TeX files with kpsewhich.

Usage:
    pykpathsea find cmr10 --format tfm
    pykpathsea find article.cls --tex-path /usr/local/texlive/2024/bin/x86_64-linux
    pykpathsea formats
    pykpathsea show-config
"""

import argparse
import json
import logging
import sys

from pykpathsea.config.loader import get_config
from pykpathsea.exceptions import KpathseaError
from pykpathsea.formats import FileFormat
from pykpathsea.tools.kpsewhich import Kpathsea


def _cmd_find(args):
    """Handle the find subcommand."""
    config = get_config()
    tex_path = args.tex_path if args.tex_path is not None else config.tex_path
    timeout = args.timeout if args.timeout is not None else config.timeout

    try:
        kpse = Kpathsea(tex_path, timeout=timeout)
        path = kpse.find_file(args.name, args.format)
    except KpathseaError as e:
        if args.json:
            print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
        else:
            print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(path)


def _cmd_formats(args):
    """Handle the formats subcommand."""
    for fmt in FileFormat:
        print(f"{fmt.name.lower():<10} {fmt.value}")


def _cmd_show_config(args):
    """Handle the show-config subcommand."""
    config = get_config()
    print(f"tex_path: {config.tex_path if config.tex_path else '(PATH)'}")
    print(f"timeout:  {config.timeout if config.timeout is not None else '(none)'}")
    print(f"source:   {config.source.value}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find TeX files with kpsewhich",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s find cmr10 --format tfm
    %(prog)s find article.cls
    %(prog)s find lmroman10-regular --format "opentype fonts"
    %(prog)s formats
    %(prog)s show-config
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log kpsewhich invocations",
    )

    subparsers = parser.add_subparsers(dest="command")

    find_parser = subparsers.add_parser("find", help="Resolve a file to its path")
    find_parser.add_argument("name", help="File name (e.g. cmr10, article.cls)")
    find_parser.add_argument(
        "-f", "--format", default=FileFormat.ALL.value,
        help="Format name or kpsewhich format value (default: all)",
    )
    find_parser.add_argument(
        "--tex-path", default=None,
        help="Directory containing kpsewhich (default: config, then PATH)",
    )
    find_parser.add_argument(
        "--timeout", type=float, default=None,
        help="Seconds to wait for kpsewhich (default: config, else no limit)",
    )
    find_parser.add_argument(
        "--json", action="store_true",
        help="Report errors as JSON on stderr",
    )

    subparsers.add_parser("formats", help="List supported file formats")
    subparsers.add_parser("show-config", help="Show resolved configuration")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    if args.command == "find":
        _cmd_find(args)
    elif args.command == "formats":
        _cmd_formats(args)
    elif args.command == "show-config":
        _cmd_show_config(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
