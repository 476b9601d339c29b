import argparse
import json
import logging
import sys

from smthash.core.canonical import CANONICAL_FORMATS
from smthash.core.config import Config
from smthash.core.encoding import ABSENT, HexText, UnsignedInteger, Utf8Text, is_hex_string, text_to_hex
from smthash.core.hashing import smthash
from smthash.core.normalize import normalize_object
from smthash.exceptions import HashingError

logger = logging.getLogger("smthash")


def _unsigned(text):
    try:
        return UnsignedInteger(int(text, 0))
    except (ValueError, HashingError):
        raise argparse.ArgumentTypeError(f"not an unsigned integer: {text!r}")


def _build_parser(config):
    parser = argparse.ArgumentParser(prog="smthash")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # typed inputs share one dest so command-line order is kept
    digest_p = sub.add_parser("digest", help="hash typed inputs in order")
    digest_p.add_argument("--int", dest="inputs", action="append", type=_unsigned,
                          help="unsigned integer (decimal or 0x-prefixed)")
    digest_p.add_argument("--text", dest="inputs", action="append", type=Utf8Text,
                          help="UTF-8 text")
    digest_p.add_argument("--hex", dest="inputs", action="append", type=HexText,
                          help="hex-encoded bytes")
    digest_p.add_argument("--null", dest="inputs", action="append_const", const=ABSENT,
                          help="absent value")

    norm_p = sub.add_parser("normalize", help="canonical hex form of a JSON document")
    norm_p.add_argument("file", nargs="?", default="-", help="JSON file, '-' for stdin")
    norm_p.add_argument("--format", choices=CANONICAL_FORMATS, default=config.canonical_format)

    t2h_p = sub.add_parser("text-to-hex")
    t2h_p.add_argument("text")

    ishex_p = sub.add_parser("is-hex")
    ishex_p.add_argument("text")

    return parser


def _load_json(path):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    config = Config.load()
    config.validate()
    logging.basicConfig(level=config.log_level)

    args = _build_parser(config).parse_args(argv)

    try:
        if args.cmd == "digest":
            print(smthash(*(args.inputs or [])).hex())

        elif args.cmd == "normalize":
            print(normalize_object(_load_json(args.file), args.format))

        elif args.cmd == "text-to-hex":
            print(text_to_hex(args.text))

        elif args.cmd == "is-hex":
            ok = is_hex_string(args.text)
            print("true" if ok else "false")
            return 0 if ok else 1

    except HashingError as e:
        logger.error("%s", e)
        return 1
    except json.JSONDecodeError as e:
        logger.error("invalid JSON input: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
