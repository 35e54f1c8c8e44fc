"""
heapbatch Command-Line Interface (CLI)

Exposes the heap batch driver and its helpers as subcommands:
- run: read min-heap/max-heap batches from a file or stdin and print them drained
- sort: heap-sort the values given on the command line
- format: fill a template string from KEY=VALUE pairs

Usage examples:
    echo "max-heap 1 2 2 4 5 exit" | python -m heapbatch.cli run
    python -m heapbatch.cli sort --min 3 1 2
    python -m heapbatch.cli format 'hello ${name}' --var name=world
"""

import argparse
import logging
import sys

from . import batch
from .datastructures.heap import HeapType, heap_sort
from .errors import HeapBatchError
from .template import DEFAULT_CLOSE_STRING, DEFAULT_OPEN_STRING, TemplateEngine

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def print_value(value):
    print(batch.format_value(value))


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_run(args):
    """Process every batch in the input stream, printing one value per line."""
    if args.input == "-":
        count = batch.process(batch.TokenStream(sys.stdin), print_value)
    else:
        with open(args.input, "r", encoding="utf-8") as f:
            count = batch.process(batch.TokenStream(f), print_value)
    logger.info("Processed %d batches", count)


def cmd_sort(args):
    """Heap-sort the given values (all numeric or all text)."""
    values = [batch.classify(v) for v in args.values]
    if any(isinstance(v, str) for v in values):
        values = list(args.values)
    heap_type = HeapType.MIN if args.min else HeapType.MAX
    for value in heap_sort(values, heap_type):
        print_value(value)


def cmd_format(args):
    """Render a template string with the given KEY=VALUE pairs."""
    engine = TemplateEngine(args.open, args.close)
    for pair in args.var:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {pair!r}")
        engine.add(key, value)
    print(engine.format(args.text))


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="heapbatch", description="Binary heap batch processing")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("run", help="Drain min-heap/max-heap batches read from input")
    s.add_argument("--input", default="-", help="input file, '-' for stdin")
    s.set_defaults(func=cmd_run)

    s = sub.add_parser("sort", help="Heap-sort values")
    order = s.add_mutually_exclusive_group()
    order.add_argument("--min", action="store_true", help="ascending order")
    order.add_argument("--max", action="store_true", help="descending order (default)")
    s.add_argument("values", nargs="*")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("format", help="Fill a template string")
    s.add_argument("text")
    s.add_argument("--var", action="append", default=[], metavar="KEY=VALUE")
    s.add_argument("--open", default=DEFAULT_OPEN_STRING)
    s.add_argument("--close", default=DEFAULT_CLOSE_STRING)
    s.set_defaults(func=cmd_format)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point; returns the process exit status."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    try:
        args.func(args)
    except (HeapBatchError, argparse.ArgumentTypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed reading input", exc_info=True)
        print(f"error: cannot read input: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
