#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for word generation.

Usage:
    namekit generate -n 10 --category elven
    namekit generate --corpus names.txt --min 5 --max 8
    namekit mutate Thorgar -n 5 --min-random 2
    namekit train --corpus names.txt -o model.json
    namekit interactive --category norse
"""

import argparse
import json
import logging
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from namekit import __version__

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False)

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"OK: {msg}", markup=False)

    def json(self, data):
        """Machine-readable output, printed even in quiet mode."""
        print(json.dumps(data, indent=2))

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title, box=box.SIMPLE)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def configure_logging(level: str = None):
    from namekit.settings import get_setting

    level = level or get_setting("logging.level", "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )


def build_kit(args):
    """Create a trained NameKit from the model/corpus options."""
    from namekit import NameKit, GenerationConfig
    from namekit.settings import get_setting, resolve_path

    config = GenerationConfig(
        min_length=getattr(args, 'min', None),
        max_length=getattr(args, 'max', None),
        min_random_chars=getattr(args, 'min_random', None),
    )

    if getattr(args, 'load_model', None):
        return NameKit.load(resolve_path(args.load_model), config=config)

    if args.corpus:
        return NameKit.from_file(resolve_path(args.corpus), delimiters=args.delimiters,
                                 order=args.order, config=config)

    categories = args.category or [get_setting("cli.default_category")]
    return NameKit.from_categories(categories, order=args.order, config=config)


def word_rows(words: list) -> list:
    return [[i, w.capitalize(), len(w)] for i, w in enumerate(words, 1)]


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate fresh words."""
    kit = build_kit(args)
    words = kit.generate(count=args.count)

    if args.json:
        out.json(words)
        return 0

    if not words:
        out.print("No words generated.")
        return 0

    out.table(['#', 'Word', 'Length'], word_rows(words),
              title=f"{len(words)} words ({len(kit.model)} training words)")
    return 0


def cmd_mutate(args, out: Output):
    """Generate variants of one word."""
    if not args.word.strip():
        out.error("Word cannot be empty")
        return 1

    kit = build_kit(args)
    words = kit.mutate(args.word, count=args.count)

    if args.json:
        out.json(words)
        return 0

    if not words:
        out.print(f"No mutations of '{args.word}' could be produced.")
        return 0

    out.table(['#', 'Word', 'Length'], word_rows(words),
              title=f"Variants of {args.word}")
    return 0


def cmd_train(args, out: Output):
    """Train a model and save it as JSON."""
    from namekit.settings import resolve_path

    kit = build_kit(args)
    path = resolve_path(args.output)
    kit.save(path)
    out.success(f"Saved order-{kit.model.order} model "
                f"({len(kit.model)} words, {len(kit.model.transitions)} contexts) to {path}")
    return 0


def cmd_categories(args, out: Output):
    """List built-in corpora."""
    from namekit import TRAINING_CORPUS, list_categories

    if args.json:
        out.json({name: len(TRAINING_CORPUS[name]) for name in list_categories()})
        return 0

    rows = [[name, len(TRAINING_CORPUS[name]), ', '.join(TRAINING_CORPUS[name][:4])]
            for name in list_categories()]
    out.table(['Corpus', 'Words', 'Examples'], rows)
    return 0


def cmd_interactive(args, out: Output):
    """Print one word per Enter press until 'q' or end of input."""
    from namekit import GenerationExhausted

    kit = build_kit(args)
    out.print("Press Enter for a new word, 'q' to quit.")

    while True:
        try:
            word = kit.generate_one()
        except GenerationExhausted as e:
            out.error(str(e))
            return 1
        print(word.capitalize(), flush=True)

        try:
            line = input()
        except EOFError:
            return 0
        if line.strip().lower() in ('q', 'quit', 'exit'):
            return 0


# =============================================================================
# Argument Parsing
# =============================================================================

def add_model_args(p: argparse.ArgumentParser):
    """Options selecting the training data."""
    p.add_argument('--corpus', help='Text file with training words')
    p.add_argument('--category', '-c', action='append',
                   help='Built-in corpus (repeatable; default from app.yaml)')
    p.add_argument('--delimiters', help='Characters separating words in the corpus file')
    p.add_argument('--order', type=int, help='Chain order (default from app.yaml)')


def add_length_args(p: argparse.ArgumentParser):
    p.add_argument('--min', type=int, help='Minimum word length')
    p.add_argument('--max', type=int, help='Maximum word length')


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - invent words in the style of a corpus',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  namekit generate -n 10 --category elven
  namekit mutate Thorgar -n 5 --min-random 2
  namekit train --corpus names.txt --output model.json
  namekit generate --load-model model.json
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--log-level', help='Logging level (default from app.yaml)')
    parser.add_argument('--seed', type=int, help='Seed the random source for repeatable output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate fresh words')
    p.add_argument('-n', '--count', type=int, help='Number of words (default from app.yaml)')
    add_length_args(p)
    add_model_args(p)
    p.add_argument('--load-model', help='Use a saved model instead of training')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- mutate ---
    p = subparsers.add_parser('mutate', aliases=['mut', 'm'], help='Generate variants of a word')
    p.add_argument('word', help='Source word')
    p.add_argument('-n', '--count', type=int, help='Number of variants (default from app.yaml)')
    add_length_args(p)
    p.add_argument('--min-random', type=int, help='Minimum prefix length kept from the word')
    add_model_args(p)
    p.add_argument('--load-model', help='Use a saved model instead of training')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- train ---
    p = subparsers.add_parser('train', help='Train a model and save it as JSON')
    add_model_args(p)
    p.add_argument('--output', '-o', required=True, help='Output file path')

    # --- categories ---
    p = subparsers.add_parser('categories', aliases=['cats'], help='List built-in corpora')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- interactive ---
    p = subparsers.add_parser('interactive', aliases=['i'], help='One word per Enter press')
    add_length_args(p)
    add_model_args(p)
    p.add_argument('--load-model', help='Use a saved model instead of training')

    # Parse
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'mut': 'mutate', 'm': 'mutate',
        'cats': 'categories',
        'i': 'interactive',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)
    configure_logging(args.log_level)

    if args.seed is not None:
        from namekit.rng import seed_rng
        seed_rng(args.seed)

    if getattr(args, 'count', None) is None and command in ('generate', 'mutate'):
        from namekit.settings import get_setting
        args.count = get_setting("cli.default_count", 10)

    commands = {
        'generate': cmd_generate,
        'mutate': cmd_mutate,
        'train': cmd_train,
        'categories': cmd_categories,
        'interactive': cmd_interactive,
    }

    from namekit import GenerationExhausted

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, FileNotFoundError, GenerationExhausted) as e:
        out.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
