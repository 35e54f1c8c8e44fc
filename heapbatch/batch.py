"""
Token-driven batch processing on top of Heap.

Input is a whitespace separated token stream. A mode token (``min-heap`` or
``max-heap``) starts a batch; the run of values that follows is classified
by the type of its first value:

- integers: consumed while the next token is an integer
- floats: consumed while the next token is numeric (ints are read as floats)
- text: consumed until the next control token or the end of input

Each batch is loaded into one Heap and drained, so the values come back
ascending for ``min-heap`` and descending for ``max-heap``. ``exit`` stops
processing; any token outside a batch is skipped.

Example:
    max-heap 3 1 2 min-heap pear apple exit
    -> 3 2 1 apple pear
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Iterator, List, Optional, Union

from .datastructures.heap import Heap, HeapType

logger = logging.getLogger(__name__)

MIN_HEAP_FLAG = "min-heap"
MAX_HEAP_FLAG = "max-heap"
EXIT_FLAG = "exit"

CONTROL_TOKENS = frozenset({MIN_HEAP_FLAG, MAX_HEAP_FLAG, EXIT_FLAG})

MODE_TOKENS = {
    MIN_HEAP_FLAG: HeapType.MIN,
    MAX_HEAP_FLAG: HeapType.MAX,
}

# NaN and infinity spellings stay text.
_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")

Value = Union[int, float, str]


def is_int(token: str) -> bool:
    return bool(_INT_RE.match(token))


def is_number(token: str) -> bool:
    return bool(_FLOAT_RE.match(token))


def classify(token: str) -> Value:
    """Convert a token into an int, a float, or leave it as text."""
    if is_int(token):
        return int(token)
    if is_number(token):
        return float(token)
    return token


def format_value(value: Value) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


class TokenStream:
    """Whitespace tokenizer over lines of text with one token of lookahead."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._tokens: Iterator[str] = (tok for line in lines for tok in line.split())
        self._pending: Optional[str] = None

    def has_next(self) -> bool:
        return self.peek() is not None

    def peek(self) -> Optional[str]:
        """Return the next token without consuming it, or None at end of input."""
        if self._pending is None:
            self._pending = next(self._tokens, None)
        return self._pending

    def next(self) -> str:
        """Consume and return the next token.

        Raises:
            EOFError: at end of input.
        """
        tok = self.peek()
        if tok is None:
            raise EOFError("token stream exhausted")
        self._pending = None
        return tok

    def __iter__(self) -> Iterator[str]:
        while self.has_next():
            yield self.next()


def read_batch(stream: TokenStream) -> List[Value]:
    """Read one homogeneous run of values; control tokens are left unread."""
    first = stream.peek()
    if first is None or first in CONTROL_TOKENS:
        return []

    values: List[Value] = []
    if is_int(first):
        while stream.has_next() and is_int(stream.peek()):  # type: ignore[arg-type]
            values.append(int(stream.next()))
    elif is_number(first):
        while stream.has_next() and is_number(stream.peek()):  # type: ignore[arg-type]
            values.append(float(stream.next()))
    else:
        while stream.has_next() and stream.peek() not in CONTROL_TOKENS:
            values.append(stream.next())
    return values


def run_batch(values: Iterable[Value], heap_type: HeapType) -> Iterator[Value]:
    """Load `values` into a fresh heap and yield them back in heap order."""
    heap: Heap[Value] = Heap(heap_type, values)
    logger.debug("Draining %d values from a %s heap", heap.size(), heap_type.name)
    return heap.drain()


def process(stream: TokenStream, emit: Callable[[Value], None]) -> int:
    """Run every batch in `stream`, passing each drained value to `emit`.

    Returns the number of batches processed.
    """
    batches = 0
    while stream.has_next():
        tok = stream.next()
        if tok == EXIT_FLAG:
            logger.debug("Exit token reached after %d batches", batches)
            break
        heap_type = MODE_TOKENS.get(tok)
        if heap_type is None:
            logger.debug("Skipping stray token %r", tok)
            continue
        values = read_batch(stream)
        for value in run_batch(values, heap_type):
            emit(value)
        batches += 1
    return batches
