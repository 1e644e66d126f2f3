#!/usr/bin/env python3
"""
Motus CLI - Command-line interface for memorable, random and PIN passwords.
"""

import argparse
import json
import logging
import sys

from motus import __version__
from motus.config import DEFAULTS, Config
from motus.core.log import get_logger, setup_logging
from motus.core.entropy import (
    BufferEntropy,
    EntropyExhaustedError,
    MAX_SEED,
    create_entropy_source,
)
from motus.core.wordlist import CorpusError
from motus.core.generator import GenerationError, SeparatorMode
from motus.core.engine import (
    MemorableRequest,
    RandomRequest,
    PinRequest,
    generate,
    estimate_entropy_bits,
)

logger = get_logger('cli')

# Accepted ranges for the size options, inclusive
WORDS_RANGE = (3, 15)
CHARACTERS_RANGE = (8, 100)
PIN_RANGE = (3, 12)
OUTPUT_FORMATS = ("text", "json")

CRACK_TIME_LABELS = {
    "100/h": "100 attempts/hour",
    "10/s": "10 attempts/second",
    "10^4/s": "10^4 attempts/second",
    "10^10/s": "10^10 attempts/second",
}


def _int_range(low: int, high: int, what: str):
    """Build an argparse type accepting integers in [low, high]."""
    def parse(value: str) -> int:
        try:
            n = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"the number of {what} must be an integer")
        if not low <= n <= high:
            raise argparse.ArgumentTypeError(
                f"the number of {what} must be between {low} and {high}"
            )
        return n
    return parse


def _seed(value: str) -> int:
    try:
        seed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("the seed must be an integer")
    if not 0 <= seed <= MAX_SEED:
        raise argparse.ArgumentTypeError(f"the seed must be between 0 and {MAX_SEED}")
    return seed


def _flag(value) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected true or false, got {value!r}")
    return value


def _output_format(value) -> str:
    if value not in OUTPUT_FORMATS:
        raise ValueError(f"expected one of {', '.join(OUTPUT_FORMATS)}, got {value!r}")
    return value


def _configured(config: Config, section: str, key: str, convert):
    """
    Read a config value through the same check as its command-line flag.

    An unusable value is reported and replaced by the built-in default.
    """
    value = config.get(section, key)
    try:
        return convert(value)
    except (TypeError, ValueError, argparse.ArgumentTypeError) as e:
        logger.warning("Ignoring %s.%s = %r in %s: %s", section, key, value, config.path, e)
        return convert(DEFAULTS[section][key])


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from config."""
    words = _int_range(*WORDS_RANGE, "words")
    characters = _int_range(*CHARACTERS_RANGE, "characters")
    digits = _int_range(*PIN_RANGE, "digits")

    parser = argparse.ArgumentParser(
        prog="motus",
        description="Motus - generate secure, random, and memorable passwords as well as PIN codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s memorable                       # Five words separated by spaces
  %(prog)s memorable -w 4 -s numbers -c    # Four capitalized words, digit separators
  %(prog)s random -c 32 --numbers --symbols
  %(prog)s pin -n 6
  %(prog)s --seed 42 --no-clipboard pin    # Reproducible output
  %(prog)s --analyze -o json random        # JSON with a strength analysis
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Output options
    out_group = parser.add_argument_group('Output')
    out_group.add_argument("--no-clipboard", action="store_true",
                           default=not _configured(config, "output", "clipboard", _flag),
                           help="Disable automatic copying of the password to the clipboard")
    out_group.add_argument("-o", "--output", choices=OUTPUT_FORMATS,
                           default=_configured(config, "output", "format", _output_format),
                           help="Output format (default: %(default)s)")
    out_group.add_argument("--analyze", action="store_true",
                           default=_configured(config, "output", "analyze", _flag),
                           help="Display a safety analysis along the generated password")

    # Entropy options
    entropy_group = parser.add_argument_group('Entropy')
    source = entropy_group.add_mutually_exclusive_group()
    source.add_argument("--seed", type=_seed, metavar="VALUE",
                        help="Seed for deterministic generation (testing only)")
    source.add_argument("--entropy-file", metavar="FILE",
                        help="Read random bytes from FILE instead of the system CSPRNG")
    entropy_group.add_argument("--no-hash", action="store_true",
                               help="Do not whiten the entropy file with SHAKE-256")

    # Misc options
    misc_group = parser.add_argument_group('Misc')
    misc_group.add_argument("--config", metavar="FILE",
                            help="Configuration file (default: ~/.motus/config.json)")
    misc_group.add_argument("-v", "--verbose", action="store_true",
                            help="Log diagnostics to stderr")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    memorable = subparsers.add_parser(
        "memorable",
        help="Generate a human-friendly memorable password",
        description="Generate a memorable password from distinct words and configurable "
                    "separators, with optional capitalization and shortened words.",
    )
    memorable.add_argument("-w", "--words", type=words,
                           default=_configured(config, "memorable", "words", words),
                           help="Number of words (default: %(default)s)")
    memorable.add_argument("-s", "--separator", type=SeparatorMode,
                           choices=list(SeparatorMode),
                           default=_configured(config, "memorable", "separator", SeparatorMode),
                           help="Separator between words (default: %(default)s)")
    memorable.add_argument("-c", "--capitalize", action="store_true",
                           default=_configured(config, "memorable", "capitalize", _flag),
                           help="Capitalize each word")
    memorable.add_argument("--no-full-words", action="store_true",
                           default=not _configured(config, "memorable", "full_words", _flag),
                           help="Use shortened, less recognizable words")

    random_cmd = subparsers.add_parser(
        "random",
        help="Generate a random password with specified complexity",
        description="Generate a random password with a configurable number of characters. "
                    "Every enabled character class appears at least once.",
    )
    random_cmd.add_argument("-c", "--characters", type=characters,
                            default=_configured(config, "random", "characters", characters),
                            help="Number of characters (default: %(default)s)")
    random_cmd.add_argument("-n", "--numbers", action="store_true",
                            default=_configured(config, "random", "numbers", _flag),
                            help="Include numbers")
    random_cmd.add_argument("-s", "--symbols", action="store_true",
                            default=_configured(config, "random", "symbols", _flag),
                            help="Include symbols")

    pin = subparsers.add_parser(
        "pin",
        help="Generate a random numeric PIN code",
        description="Generate a random numeric PIN code with a configurable length.",
    )
    pin.add_argument("-n", "--numbers", type=digits,
                     default=_configured(config, "pin", "numbers", digits),
                     help="Number of digits (default: %(default)s)")

    return parser


def build_request(args):
    """Translate parsed arguments into a generation request."""
    if args.command == "memorable":
        return MemorableRequest(
            word_count=args.words,
            separator=args.separator,
            capitalize=args.capitalize,
            full_words=not args.no_full_words,
        )
    if args.command == "random":
        return RandomRequest(
            length=args.characters,
            include_numbers=args.numbers,
            include_symbols=args.symbols,
        )
    return PinRequest(digit_count=args.numbers)


def main(argv=None):
    # --config has to be known before the real parser gets its defaults
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    pre.add_argument("-v", "--verbose", action="store_true")
    known, _ = pre.parse_known_args(argv)

    if known.verbose:
        setup_logging(logging.DEBUG)

    config = Config(known.config)
    parser = build_parser(config)
    args = parser.parse_args(argv)

    return _handle_generation(args)


def _handle_generation(args):
    """Generate, print, then copy the password."""
    entropy = None
    try:
        entropy = create_entropy_source(
            seed=args.seed,
            entropy_file=args.entropy_file,
            whiten=not args.no_hash,
        )
        request = build_request(args)
        secret = generate(request, entropy)

        if args.output == "json":
            _print_json(secret, request, args.analyze)
        elif args.analyze:
            _print_report(secret, request)
        else:
            print(secret.text)

        if not args.no_clipboard:
            from motus.clipboard import copy_to_clipboard
            copy_to_clipboard(secret.text)

        return 0

    except (GenerationError, EntropyExhaustedError, CorpusError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nUser interrupt", file=sys.stderr)
        return 130
    finally:
        if isinstance(entropy, BufferEntropy):
            entropy.wipe()


def _print_json(secret, request, analyze):
    """Print the password as a single JSON object."""
    output = {
        "kind": str(secret.kind),
        "password": secret.text,
    }
    if analyze:
        from motus.analysis import analyze as analyze_strength

        analysis = analyze_strength(secret.text).to_dict()
        analysis["entropy_bits"] = round(estimate_entropy_bits(request), 1)
        output["analysis"] = analysis

    print(json.dumps(output))


def _print_report(secret, request):
    """Print the password followed by its strength analysis."""
    from motus.analysis import analyze as analyze_strength

    report = analyze_strength(secret.text)
    entropy_bits = estimate_entropy_bits(request)

    print("=" * 60)
    print("Generated Password")
    print(f"  {secret.text}")
    print("-" * 60)
    print("Security Analysis")
    print(f"  Strength: {report.strength}")
    print(f"  Guesses:  {report.guesses_display}")
    print(f"  Entropy:  ~{entropy_bits:.1f} bits")
    print("-" * 60)
    print("Crack time estimations")
    for key, label in CRACK_TIME_LABELS.items():
        print(f"  {label + ':':<24}{report.crack_times[key]}")
    print("=" * 60)


if __name__ == "__main__":
    sys.exit(main() or 0)
