import inspect
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Immediate(Generic[T]):
    value: T


@dataclass(slots=True, frozen=True)
class Deferred:
    source: Any


Outcome = Immediate | Deferred


def is_future_like(value: Any) -> bool:
    # Both a success and a failure channel are required. A value with
    # only one of them is treated as a plain result.
    if isinstance(value, type):
        return False

    return callable(getattr(value, "add_done_callback", None)) and callable(
        getattr(value, "exception", None)
    )


def classify_result(value: Any) -> Outcome:
    if is_future_like(value) or inspect.isawaitable(value):
        return Deferred(value)

    return Immediate(value)
