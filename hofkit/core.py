"""
hofkit.core - Higher-order sequence functions and function combinators

Categories:
- Iteration primitives: for_each, filter_seq, map_seq
- Partial application: bind_args
- Argument reordering: cycle_args
- Composition: join_fns
- Small combinators: identity, constantly

Everything here is eager and synchronous. Iteration primitives return new
lists and never mutate their input. When a caller-supplied function raises,
the whole call fails with an InvocationError chained to the original
exception; errors already raised by hofkit pass through unchanged.
"""

import inspect
import logging
from typing import Iterable, Optional

from hofkit.types import ArityMismatch, HofkitError, InvocationError, callable_name

logger = logging.getLogger(__name__)


# =============================================================================
# Invocation helpers
# =============================================================================


def _signature(func) -> Optional[inspect.Signature]:
    """Return the signature of func, or None if it can't be introspected."""
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        return None


def _check_arity(func, args: tuple, kwargs: dict) -> None:
    """Raise ArityMismatch if func can't accept args/kwargs."""
    sig = _signature(func)
    if sig is None:
        return
    try:
        sig.bind(*args, **kwargs)
    except TypeError as e:
        logger.debug("arity mismatch calling %s: %s", callable_name(func), e)
        raise ArityMismatch(func, args, f"{callable_name(func)}: {e}") from e


def _invoke(func, args: tuple, kwargs: Optional[dict] = None, index=None, element=None):
    """
    Call func(*args, **kwargs), wrapping foreign exceptions.

    Args:
        func: The callable to invoke
        args: Positional arguments
        kwargs: Keyword arguments
        index: Element or stage index, recorded on the error
        element: The value being processed, recorded on the error

    Returns:
        Result of the call

    Raises:
        InvocationError: If func raised anything other than a HofkitError
    """
    if kwargs is None:
        kwargs = {}
    try:
        return func(*args, **kwargs)
    except HofkitError:
        raise
    except Exception as e:
        logger.debug(
            "%s raised %s (index=%r)", callable_name(func), type(e).__name__, index
        )
        raise InvocationError(func, index=index, element=element) from e


def _require_callable(func, who: str) -> None:
    if not callable(func):
        raise TypeError(f"{who} expects a callable, got {type(func).__name__}")


# =============================================================================
# Iteration Primitives
# =============================================================================


def for_each(coll: Optional[Iterable], side_effect):
    """Call side_effect on every element of coll in order; return coll.

    Stops at the first failure, so later elements are never visited.
    """
    if coll is None:
        return coll
    for i, x in enumerate(coll):
        _invoke(side_effect, (x,), index=i, element=x)
    return coll


def filter_seq(coll: Optional[Iterable], pred) -> list:
    """Return a new list of the elements of coll for which pred is truthy."""
    if coll is None:
        return []
    result = []
    for i, x in enumerate(coll):
        if _invoke(pred, (x,), index=i, element=x):
            result.append(x)
    return result


def map_seq(coll: Optional[Iterable], f) -> list:
    """Return a new list of f(x) for each x in coll, same length and order."""
    if coll is None:
        return []
    return [_invoke(f, (x,), index=i, element=x) for i, x in enumerate(coll)]


# =============================================================================
# Partial Application
# =============================================================================


class Partial:
    """
    A callable with a prefix of positional arguments already bound.

    Calling a Partial appends the call-time arguments after the bound ones:
    Partial(f, (a, b))(c, d) calls f(a, b, c, d). The bound arguments are
    held in a tuple, so neither the original function nor earlier partials
    are affected by creating new ones.
    """

    __slots__ = ("_func", "_args")

    def __init__(self, func, args: tuple):
        self._func = func
        self._args = tuple(args)

    @property
    def func(self):
        return self._func

    @property
    def args(self) -> tuple:
        return self._args

    def __call__(self, *extra, **kwargs):
        full_args = self._args + extra
        _check_arity(self.func, full_args, kwargs)
        return _invoke(self.func, full_args, kwargs)

    def __repr__(self):
        bound = ", ".join(repr(a) for a in self.args)
        return f"bind_args({callable_name(self.func)}{', ' if bound else ''}{bound})"


def bind_args(func, *bound) -> Partial:
    """
    Bind a prefix of positional arguments to func.

    bind_args(f, a)(b) == f(a, b). Nesting keeps the first bind's
    arguments leftmost: bind_args(bind_args(f, a), b)(c) == f(a, b, c).

    Arity is not checked here; calling the result with arguments the
    underlying function can't take raises ArityMismatch.
    """
    _require_callable(func, "bind_args")
    return Partial(func, bound)


# =============================================================================
# Argument Reordering
# =============================================================================


class Cycled:
    """A callable that moves its first positional argument to the end."""

    __slots__ = ("_func",)

    def __init__(self, func):
        self._func = func

    @property
    def func(self):
        return self._func

    def __call__(self, *args, **kwargs):
        if len(args) > 1:
            args = args[1:] + args[:1]
        _check_arity(self.func, args, kwargs)
        return _invoke(self.func, args, kwargs)

    def __repr__(self):
        return f"cycle_args({callable_name(self.func)})"


def cycle_args(func) -> Cycled:
    """
    Wrap func so that cycle_args(func)(a, b, c) == func(b, c, a).

    Calls with zero or one positional argument pass through unchanged.
    Mostly useful for moving the data argument of for_each, filter_seq or
    map_seq to the end so the behaviour argument can be bound first.
    """
    _require_callable(func, "cycle_args")
    return Cycled(func)


# =============================================================================
# Composition
# =============================================================================


class Pipeline:
    """
    A unary callable that feeds a value through stages left to right.

    Every stage must accept exactly one argument; a stage that can't is
    reported as ArityMismatch before it runs. The first stage that fails
    aborts the pipeline. Stages that already ran are not undone. Errors
    leaving the pipeline carry the failing stage's index in `stage`.
    """

    __slots__ = ("_stages",)

    def __init__(self, stages: tuple):
        self._stages = tuple(stages)

    @property
    def stages(self) -> tuple:
        return self._stages

    def __call__(self, *args):
        if len(args) != 1:
            raise ArityMismatch(
                self, args, f"pipeline takes exactly 1 argument, got {len(args)}"
            )
        value = args[0]
        for i, stage in enumerate(self._stages):
            try:
                _check_arity(stage, (value,), {})
                value = _invoke(stage, (value,), index=i, element=value)
            except HofkitError as e:
                # Nested pipelines: the innermost one records the stage
                if e.stage is None:
                    e.stage = i
                if isinstance(e, InvocationError) and e.index is None:
                    e.index = i
                    e.element = value
                raise
        return value

    def __len__(self):
        return len(self._stages)

    def __repr__(self):
        # Partial/Cycled/Pipeline instances have no __qualname__, so this
        # falls back to their repr
        names = ", ".join(callable_name(s) for s in self._stages)
        return f"join_fns({names})"


def join_fns(*fns) -> Pipeline:
    """
    Compose unary functions left to right.

    join_fns(f, g)(x) == g(f(x)). At least one function is required.
    """
    if not fns:
        raise TypeError("join_fns takes at least 1 function, got 0")
    for fn in fns:
        _require_callable(fn, "join_fns")
    return Pipeline(fns)


# =============================================================================
# Small Combinators
# =============================================================================


def identity(x):
    """Return x unchanged."""
    return x


def constantly(value):
    """Return a function that ignores its arguments and returns value."""

    def f(*args, **kwargs):
        return value

    return f


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Iteration primitives
    "for_each",
    "filter_seq",
    "map_seq",
    # Partial application
    "Partial",
    "bind_args",
    # Argument reordering
    "Cycled",
    "cycle_args",
    # Composition
    "Pipeline",
    "join_fns",
    # Combinators
    "identity",
    "constantly",
]
