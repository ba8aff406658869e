"""
hofkit.types - Error types and callable aliases

This module contains the types shared by every hofkit module:
- HofkitError: Base class for errors raised on behalf of caller code
- InvocationError: A caller-supplied function failed while being applied
- ArityMismatch: A wrapped callable was called with unusable arguments
- Predicate, Transformation, SideEffect, Sink: Callable aliases

Errors always chain the original exception as ``__cause__`` so callers
can get back to what actually went wrong.
"""

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

Predicate = Callable[[T], bool]
Transformation = Callable[[A], B]
SideEffect = Callable[[T], Any]
Sink = Callable[[Any], Any]


def callable_name(func: Any) -> str:
    """Return a readable name for a callable, for error messages."""
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if name is None:
        return repr(func)
    return name


class HofkitError(Exception):
    """
    Base class for errors raised while applying caller-supplied functions.

    Attributes:
        stage: Index of the pipeline stage the error came out of, set by the
               innermost pipeline that saw it (None outside pipelines)
    """

    stage: Optional[int] = None


class InvocationError(HofkitError):
    """
    Raised when a predicate, transformation, side effect, bound function or
    pipeline stage fails.

    Attributes:
        func: The callable that raised
        index: Element index (iteration) or stage index (pipelines), if any.
               A pipeline fills it in with the stage index when a wrapped
               stage (Partial, Cycled) left it unset
        element: The value being processed when the failure happened
    """

    def __init__(
        self,
        func: Any,
        index: Optional[int] = None,
        element: Any = None,
        message: Optional[str] = None,
    ):
        self.func = func
        self.index = index
        self.element = element
        if message is None:
            message = f"{callable_name(func)} failed"
            if index is not None:
                message += f" at index {index}"
        super().__init__(message)

    @property
    def cause(self) -> Optional[BaseException]:
        """The original exception raised by the failing callable."""
        return self.__cause__


class ArityMismatch(HofkitError, TypeError):
    """
    Raised when a partial, cycled or joined callable is invoked with an
    argument list the underlying function cannot accept.
    """

    def __init__(self, func: Any, args: tuple, message: Optional[str] = None):
        self.func = func
        self.args_given = args
        if message is None:
            message = (
                f"{callable_name(func)} cannot be called with "
                f"{len(args)} positional argument(s)"
            )
        super().__init__(message)
