from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Tuple, TypeVar

from .future_factory import FutureLike

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class PendingCall(Generic[T]):
    """A wrapped call captured while its funnel was held."""

    target: Callable[..., T]
    args: Tuple[Any, ...]
    kwargs: Dict[str, Any]
    handle: FutureLike[T]

    def invoke(self) -> T:
        return self.target(*self.args, **self.kwargs)
