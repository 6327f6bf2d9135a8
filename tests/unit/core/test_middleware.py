"""Unit tests for the in-flight request cap."""

import threading

import pytest
from django.http import HttpResponse

from modules.core.middleware import ConnectionLimitMiddleware

pytestmark = pytest.mark.unit


class TestConnectionLimitMiddleware:
    def test_slots_follow_db_pool_size(self, settings):
        settings.DB_POOL_SIZE = 2
        middleware = ConnectionLimitMiddleware(lambda request: HttpResponse())
        assert middleware.slots.acquire(blocking=False)
        assert middleware.slots.acquire(blocking=False)
        assert not middleware.slots.acquire(blocking=False)

    def test_slot_is_released_after_response(self, settings):
        settings.DB_POOL_SIZE = 1
        middleware = ConnectionLimitMiddleware(lambda request: HttpResponse())
        middleware("first")
        assert middleware.slots.acquire(blocking=False)

    def test_slot_is_released_when_view_raises(self, settings):
        settings.DB_POOL_SIZE = 1

        def get_response(request):
            raise RuntimeError("boom")

        middleware = ConnectionLimitMiddleware(get_response)
        with pytest.raises(RuntimeError):
            middleware("first")
        assert middleware.slots.acquire(blocking=False)

    def test_excess_request_waits_for_a_free_slot(self, settings):
        settings.DB_POOL_SIZE = 1
        entered = []
        first_inside = threading.Event()
        release_first = threading.Event()

        def get_response(request):
            entered.append(request)
            if request == "first":
                first_inside.set()
                release_first.wait(5)
            return HttpResponse()

        middleware = ConnectionLimitMiddleware(get_response)
        first = threading.Thread(target=middleware, args=("first",))
        second = threading.Thread(target=middleware, args=("second",))
        first.start()
        assert first_inside.wait(5)
        second.start()
        second.join(0.2)
        assert entered == ["first"]

        release_first.set()
        first.join(5)
        second.join(5)
        assert entered == ["first", "second"]

    def test_installed_in_middleware_stack(self, settings):
        assert "modules.core.middleware.ConnectionLimitMiddleware" in settings.MIDDLEWARE
