r"""Rejection predicates deciding whether an attempt is retried.

An attempt is *rejected* when at least one registered predicate matches
it. A rejected attempt is retried unless the stop strategy says
otherwise; an accepted attempt ends the retry loop.
"""

from __future__ import annotations

__all__ = [
    "AnyAttemptPredicate",
    "BaseAttemptPredicate",
    "ExceptionPredicate",
    "ExceptionTypePredicate",
    "ResultPredicate",
]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from aretry.utils.validation import check_exception_type

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.attempt import Attempt


class BaseAttemptPredicate(ABC):
    """Abstract base class for predicates over attempts.

    Instances are callable, so they can be used wherever a
    ``Callable[[Attempt], bool]`` is expected.
    """

    @abstractmethod
    def matches(self, attempt: Attempt) -> bool:
        """Indicate if the attempt matches this predicate.

        Args:
            attempt: The attempt to evaluate.

        Returns:
            ``True`` if the attempt should be retried.
        """

    def __call__(self, attempt: Attempt) -> bool:
        return self.matches(attempt)


class ExceptionTypePredicate(BaseAttemptPredicate):
    """Match attempts that raised an exception of a given type.

    Subclasses of ``exception_type`` match as well.

    Args:
        exception_type: The exception class, or tuple of classes, to match.

    Raises:
        TypeError: If ``exception_type`` is not an exception class.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.predicate import ExceptionTypePredicate
        >>> predicate = ExceptionTypePredicate(LookupError)
        >>> predicate(Attempt.from_exception(KeyError("k"), 1, 0.0))
        True
        >>> predicate(Attempt.from_exception(ValueError(), 1, 0.0))
        False
        >>> predicate(Attempt.from_result("foo", 1, 0.0))
        False

        ```
    """

    def __init__(
        self, exception_type: type[BaseException] | tuple[type[BaseException], ...]
    ) -> None:
        check_exception_type("exception_type", exception_type)
        self.exception_type = exception_type

    def matches(self, attempt: Attempt) -> bool:
        if not attempt.has_exception:
            return False
        return isinstance(attempt.exception_cause, self.exception_type)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(exception_type={self.exception_type!r})"


class ExceptionPredicate(BaseAttemptPredicate):
    """Match attempts whose exception satisfies a user predicate.

    Attempts that returned a result never match.

    Args:
        predicate: Function called with the raised exception.
    """

    def __init__(self, predicate: Callable[[Exception], bool]) -> None:
        self.predicate = predicate

    def matches(self, attempt: Attempt) -> bool:
        if not attempt.has_exception:
            return False
        return bool(self.predicate(attempt.exception_cause))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"


class ResultPredicate(BaseAttemptPredicate):
    """Match attempts whose result satisfies a user predicate.

    Attempts that raised an exception never match.

    Args:
        predicate: Function called with the returned value.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.predicate import ResultPredicate
        >>> predicate = ResultPredicate(lambda result: result is None)
        >>> predicate(Attempt.from_result(None, 1, 0.0))
        True
        >>> predicate(Attempt.from_exception(ValueError(), 1, 0.0))
        False

        ```
    """

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = predicate

    def matches(self, attempt: Attempt) -> bool:
        if not attempt.has_result:
            return False
        return bool(self.predicate(attempt.result))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"


class AnyAttemptPredicate(BaseAttemptPredicate):
    """Combine predicates with a short-circuiting logical OR.

    The predicates are evaluated in order and the evaluation stops at the
    first match. Without any predicate nothing matches, so every attempt is
    accepted.

    Args:
        predicates: The predicates to combine.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.predicate import (
        ...     AnyAttemptPredicate,
        ...     ExceptionTypePredicate,
        ...     ResultPredicate,
        ... )
        >>> predicate = AnyAttemptPredicate(
        ...     [ExceptionTypePredicate(OSError), ResultPredicate(lambda r: r == "foo")]
        ... )
        >>> predicate(Attempt.from_result("foo", 1, 0.0))
        True
        >>> predicate(Attempt.from_result("bar", 1, 0.0))
        False
        >>> AnyAttemptPredicate()(Attempt.from_exception(OSError(), 1, 0.0))
        False

        ```
    """

    def __init__(self, predicates: Iterable[BaseAttemptPredicate] = ()) -> None:
        self.predicates = tuple(predicates)

    def matches(self, attempt: Attempt) -> bool:
        return any(predicate.matches(attempt) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicates={self.predicates!r})"
