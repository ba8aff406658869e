"""
hofkit.sinks - Sink adapters

A sink is a unary function that consumes a value for its effect. hofkit
never performs output itself; these helpers turn things the caller already
owns into sinks suitable for for_each.

- stream_sink: Adapts any object with a write method (a file, sys.stdout,
  io.StringIO, ...) into a sink
- collector: Builds a Collector, a bundle of closures over a private list
"""

from typing import Any, Callable, NamedTuple


def stream_sink(stream, end: str = "\n") -> Callable[[Any], None]:
    """
    Return a sink that writes str(value) + end to stream.

    Args:
        stream: Object with a callable write method, supplied by the caller
        end: Text written after each value

    Raises:
        TypeError: If stream has no callable write method
    """
    write = getattr(stream, "write", None)
    if not callable(write):
        raise TypeError(
            f"stream_sink expects an object with write(), got {type(stream).__name__}"
        )

    def sink(value):
        write(f"{value}{end}")

    return sink


class Collector(NamedTuple):
    """Operations returned by collector(), all sharing one private list."""

    append: Callable[[Any], None]
    items: Callable[[], list]
    clear: Callable[[], None]
    count: Callable[[], int]


def collector() -> Collector:
    """
    Create a Collector whose append function can be used as a sink.

    The collected values live in a list owned by the closures; items()
    returns a copy so callers can't mutate it from outside.
    """
    collected: list = []

    def append(value):
        collected.append(value)

    def items():
        return list(collected)

    def clear():
        collected.clear()

    def count():
        return len(collected)

    return Collector(append=append, items=items, clear=clear, count=count)
