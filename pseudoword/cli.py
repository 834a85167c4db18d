#!/usr/bin/env python3
"""
Pseudoword CLI
==============
Command-line interface for training a model on a seed and generating
pseudowords from it.

Usage:
    pseudoword generate lorem ipsum dolor sit amet -n 10
    pseudoword generate --seed-file words.txt --order 3 --min-length 5
    pseudoword density --seed-file words.txt
    pseudoword inspect lorem ipsum --context or
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pseudoword import __version__
from pseudoword.entropy import get_rng
from pseudoword.errors import InvalidSeedError
from pseudoword.matrix import BOUNDARY, max_contexts
from pseudoword.model import Model, from_seed
from pseudoword.sampler import resolve_context
from pseudoword.settings import get_setting

logger = logging.getLogger(__name__)

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False, emoji=False)
        self.err_console = Console(stderr=True, highlight=False, emoji=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def result(self, text: str):
        """Print essential output, even in quiet mode."""
        self.console.print(text, markup=False, soft_wrap=True)

    def error(self, msg: str):
        self.err_console.print(f"Error: {msg}", markup=False, soft_wrap=True)

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def configure_logging(verbose: bool = False):
    """Route log records through rich, at DEBUG when verbose."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, str(get_setting('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=get_setting('logging.format', '%(message)s'),
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_seed(args) -> List[str]:
    """Collect seed words from positional arguments and --seed-file."""
    words = list(args.seed or [])
    if getattr(args, 'seed_file', None):
        path = Path(args.seed_file).expanduser()
        words.extend(path.read_text(encoding='utf-8').split())
    return words


def build_from_args(args) -> Model:
    """Train a model from the common seed/order/charset arguments."""
    rng = get_rng(args.random_seed)
    model = from_seed(load_seed(args), order=args.order, charset=args.charset, rng=rng)
    logger.debug("Trained %r", model)
    return model


def show_symbol(symbol: str, context: bool = False) -> str:
    if symbol != BOUNDARY:
        return symbol
    return "$ (start)" if context else "$ (end)"


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate pseudowords."""
    model = build_from_args(args)

    out.print(f"Generating {args.count} words (order {model.order}, "
              f"{model.word_count} training words)...")

    words = model.generate_batch(
        args.count,
        unique=args.unique,
        min_length=args.min_length,
        max_length=args.max_length,
        max_attempts=args.max_attempts,
    )

    if not words:
        out.print("No words generated.")
        return 0

    if out.quiet:
        for word in words:
            out.result(word)
        return 0

    rows = [[i, word, len(word)] for i, word in enumerate(words, 1)]
    out.table(['#', 'Word', 'Length'], rows)
    return 0


def cmd_density(args, out: Output):
    """Show how much of the context space the seed covers."""
    model = build_from_args(args)
    value = model.density()

    if out.quiet:
        out.result(f"{value * 100:.4f}")
        return 0

    rows = [
        ['Training words', model.word_count],
        ['Order', model.order],
        ['Charset size', len(model.charset)],
        ['Contexts observed', len(model.matrix)],
        ['Contexts possible', max_contexts(model.order, len(model.charset))],
        ['Density', f"{value * 100:.4f}%"],
    ]
    out.table(['Metric', 'Value'], rows, title='Seed density')
    return 0


def cmd_inspect(args, out: Output):
    """List contexts and their observed continuations."""
    model = build_from_args(args)
    matrix = model.matrix

    if args.context is not None:
        matched = resolve_context(args.context, matrix, model.order)
        if matched is None:
            out.print("Model is empty.")
            return 0
        if matched != args.context:
            out.print(f"Context {args.context!r} backs off to {matched!r}")
        contexts = [matched]
    else:
        contexts = sorted(matrix, key=lambda c: (c != BOUNDARY, len(c), c))[:args.limit]

    rows = []
    for context in contexts:
        transition = matrix[context]
        continuations = sorted(transition.observed(), key=lambda pair: -pair[1])
        shown = ', '.join(f"{show_symbol(s)}:{n}" for s, n in continuations)
        rows.append([show_symbol(context, context=True), transition.total, shown])

    if out.quiet:
        for context, total, shown in rows:
            out.result(f"{context}  {total}  {shown}")
        return 0

    out.table(['Context', 'Total', 'Continuations'], rows,
              title=f"{len(matrix)} contexts")
    return 0


# =============================================================================
# Main
# =============================================================================

def add_model_arguments(p: argparse.ArgumentParser):
    p.add_argument('seed', nargs='*', help='Seed words to train on')
    p.add_argument('--seed-file', '-f', help='File of whitespace-separated seed words')
    p.add_argument('--order', '-o', type=int, help='Markov order (default: 2)')
    p.add_argument('--charset', '-c', help='Allowed characters (default: latin letters)')
    p.add_argument('--random-seed', '-r', type=int, help='Seed the random source for reproducible output')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pseudoword',
        description='Pseudoword - Markov chain pseudoword generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate lorem ipsum dolor sit amet -n 10
  %(prog)s generate --seed-file words.txt --order 3 --min-length 5
  %(prog)s density --seed-file words.txt
  %(prog)s inspect lorem ipsum --context or
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate pseudowords')
    add_model_arguments(p)
    p.add_argument('-n', '--count', type=int,
                   default=get_setting('generation.batch_count', 10),
                   help='Number of words (default: 10)')
    p.add_argument('--min-length', type=int, help='Retry words shorter than this')
    p.add_argument('--max-length', type=int, help='Maximum word length (default: 20)')
    p.add_argument('--max-attempts', type=int, help='Attempts per word before giving up on --min-length')
    p.add_argument('--allow-duplicates', dest='unique', action='store_false',
                   help='Allow the same word more than once')

    # --- density ---
    p = subparsers.add_parser('density', aliases=['d'], help='Show seed density')
    add_model_arguments(p)

    # --- inspect ---
    p = subparsers.add_parser('inspect', aliases=['i'], help='Show the transition matrix')
    add_model_arguments(p)
    p.add_argument('--context', help='Show a single context (after backoff)')
    p.add_argument('--limit', type=int, default=50, help='Max contexts listed (default: 50)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'd': 'density',
        'i': 'inspect',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'density': cmd_density,
        'inspect': cmd_inspect,
    }

    handler = commands[command]
    try:
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (InvalidSeedError, ValueError, OSError) as e:
        out.error(str(e))
        if args.verbose:
            logger.exception("Command %s failed", command)
        return 1


if __name__ == '__main__':
    sys.exit(main())
