"""Success / Failure tagged union for callers that prefer values over raises."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Success[T]:
    """A 2xx response and its parsed body."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """A non-2xx response, reduced to its message and status code.

    Falsy, so callers can write::

        outcome = await transport.attempt(request)
        if not outcome:
            show_error(outcome.message)
    """

    message: str
    status_code: int

    def __bool__(self) -> bool:
        return False


type Outcome[T] = Success[T] | Failure
