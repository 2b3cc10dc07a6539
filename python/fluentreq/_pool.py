import threading
from collections.abc import Callable
from typing import Generic, Protocol, TypeVar

from fluentreq.config import get_config
from fluentreq.request.prepared import PreparedRequest
from fluentreq.response import Response


class Resettable(Protocol):
    def reset(self) -> None: ...


T = TypeVar("T", bound=Resettable)


class ObjectPool(Generic[T]):
    """Free list of reusable objects. Released objects are reset before they are handed out again."""

    def __init__(self, factory: Callable[[], T], max_size: int | None = None) -> None:
        self._factory = factory
        self._max_size = max_size
        self._free: list[T] = []
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return get_config().pool_size if self._max_size is None else self._max_size

    def acquire(self) -> T:
        with self._lock:
            if self._free:
                return self._free.pop()
        return self._factory()

    def release(self, obj: T) -> None:
        obj.reset()
        with self._lock:
            if len(self._free) < self.max_size:
                self._free.append(obj)

    def __len__(self) -> int:
        return len(self._free)


request_pool: ObjectPool[PreparedRequest] = ObjectPool(PreparedRequest)
response_pool: ObjectPool[Response] = ObjectPool(Response)
