"""
hofkit - Higher-order functions for sequences

A small library of eager, synchronous higher-order functions: iterate,
filter and map over sequences, bind leading arguments, rotate argument
order and compose unary functions into pipelines.

Submodules:
- types: Error hierarchy and callable aliases
- core: for_each, filter_seq, map_seq, bind_args, cycle_args, join_fns
- sinks: Adapters that turn streams and closures into sinks
- tutorial: The "who can drive" worked example

hofkit performs no I/O. Output goes through sinks supplied by the caller.
"""

import logging

from hofkit.core import (
    Cycled,
    Partial,
    Pipeline,
    bind_args,
    constantly,
    cycle_args,
    filter_seq,
    for_each,
    identity,
    join_fns,
    map_seq,
)
from hofkit.sinks import Collector, collector, stream_sink
from hofkit.types import (
    ArityMismatch,
    HofkitError,
    InvocationError,
    Predicate,
    SideEffect,
    Sink,
    Transformation,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Errors
    "HofkitError",
    "InvocationError",
    "ArityMismatch",
    # Callable aliases
    "Predicate",
    "Transformation",
    "SideEffect",
    "Sink",
    # Iteration primitives
    "for_each",
    "filter_seq",
    "map_seq",
    # Combinators
    "Partial",
    "bind_args",
    "Cycled",
    "cycle_args",
    "Pipeline",
    "join_fns",
    "identity",
    "constantly",
    # Sinks
    "Collector",
    "collector",
    "stream_sink",
]
