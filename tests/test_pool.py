from concurrent.futures import ThreadPoolExecutor

import pytest

from fluentreq._pool import ObjectPool
from fluentreq.config import get_config
from fluentreq.request import PreparedRequest
from fluentreq.response import Response


def test_acquire_creates_when_empty():
    pool: ObjectPool[Response] = ObjectPool(Response)
    assert len(pool) == 0
    assert pool.acquire() is not pool.acquire()


def test_release_resets_and_reuses():
    pool: ObjectPool[PreparedRequest] = ObjectPool(PreparedRequest)
    request = pool.acquire()
    request.headers.append(("a", "b"))
    request.cookies["c"] = "d"
    request.body = b"body"
    request.content_length = 4

    pool.release(request)
    assert len(pool) == 1

    reused = pool.acquire()
    assert reused is request
    assert reused.headers == [] and reused.cookies == {} and reused.body is None and reused.content_length == 0
    assert len(pool) == 0


def test_max_size():
    pool: ObjectPool[Response] = ObjectPool(Response, max_size=1)
    first, second = pool.acquire(), pool.acquire()
    pool.release(first)
    pool.release(second)
    assert len(pool) == 1
    assert pool.acquire() is first


def test_max_size_from_config(monkeypatch: pytest.MonkeyPatch):
    pool: ObjectPool[Response] = ObjectPool(Response)
    assert pool.max_size == 64

    monkeypatch.setenv("FLUENTREQ_POOL_SIZE", "0")
    get_config.cache_clear()
    assert pool.max_size == 0
    pool.release(pool.acquire())
    assert len(pool) == 0


def test_concurrent_use():
    pool: ObjectPool[Response] = ObjectPool(Response, max_size=8)

    def use(_: int) -> None:
        resp = pool.acquire()
        resp.status = 200
        pool.release(resp)

    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(use, range(200)))

    assert 1 <= len(pool) <= 8
