from __future__ import annotations

import logging
from typing import Any

import pytest

from pystoryurl.exceptions import NavigationError
from pystoryurl.models.navigation import NavigateOptions
from pystoryurl.navigation import NavigationBridge
from pystoryurl.state.events import CoreEvent


class _FakeRouter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, NavigateOptions]] = []

    def navigate(self, url: str, options: NavigateOptions) -> None:
        self.calls.append((url, options))


class _BrokenRouter:
    def navigate(self, url: str, options: NavigateOptions) -> None:
        raise RuntimeError("history unavailable")


class _FakeEvents:
    def __init__(self) -> None:
        self.handlers: dict[str, list[Any]] = {}

    def on(self, event: str, handler: Any) -> None:
        self.handlers.setdefault(str(event), []).append(handler)

    def emit(self, event: str, *args: Any) -> None:
        for handler in self.handlers.get(str(event), []):
            handler(*args)


def test_navigate_url_delegates_unchanged() -> None:
    router = _FakeRouter()
    bridge = NavigationBridge(router)

    bridge.navigate_url("/iframe.html?id=button--primary", {"replace": True})

    assert router.calls == [("/iframe.html?id=button--primary", NavigateOptions(replace=True))]


def test_navigate_url_defaults_options() -> None:
    router = _FakeRouter()

    NavigationBridge(router).navigate_url("/x")

    assert router.calls[0][1] == NavigateOptions()


def test_navigate_wraps_route_in_path_param() -> None:
    router = _FakeRouter()
    bridge = NavigationBridge(router, base_path="/sb/")

    bridge.navigate("/story/button--primary&args=a:1", NavigateOptions(replace=True))

    assert router.calls == [("/sb/?path=/story/button--primary&args=a:1", NavigateOptions(replace=True))]


def test_plain_navigation_is_verbatim() -> None:
    router = _FakeRouter()

    NavigationBridge(router).navigate("https://example.com/", {"plain": True})

    assert router.calls[0][0] == "https://example.com/"


def test_navigate_url_event_is_forwarded() -> None:
    router = _FakeRouter()
    events = _FakeEvents()
    NavigationBridge(router).register(events)

    events.emit(CoreEvent.NAVIGATE_URL, "/?path=/docs/intro", {"replace": False})

    assert router.calls == [("/?path=/docs/intro", NavigateOptions(replace=False))]


def test_router_failure_is_wrapped() -> None:
    bridge = NavigationBridge(_BrokenRouter())

    with pytest.raises(NavigationError) as excinfo:
        bridge.navigate_url("/x")

    assert excinfo.value.url == "/x"
    assert isinstance(excinfo.value.__cause__, RuntimeError)


@pytest.mark.parametrize("options", [{"replace": "sometimes"}, 42, "replace"])
def test_navigate_url_event_with_malformed_options_is_ignored(
    options: Any, caplog: pytest.LogCaptureFixture
) -> None:
    router = _FakeRouter()
    events = _FakeEvents()
    NavigationBridge(router).register(events)

    with caplog.at_level(logging.WARNING, logger="pystoryurl.navigation"):
        events.emit(CoreEvent.NAVIGATE_URL, "/x", options)

    assert router.calls == []
    assert "malformed options" in caplog.text
