from __future__ import annotations

from pystoryurl.ingestion.location import LocationParser, parse_location
from pystoryurl.models.location import Location
from pystoryurl.state.store import QueryParamStore, UrlState


def _store(url: str = "/?path=/story/button--primary&foo=1") -> tuple[QueryParamStore, list[UrlState]]:
    store = QueryParamStore(parse_location(Location.from_url(url)))
    notifications: list[UrlState] = []
    store.subscribe(notifications.append)
    return store, notifications


def test_uninitialized_store_returns_none() -> None:
    store = QueryParamStore()

    assert store.get_query_param("foo") is None
    assert store.get_url_state().query_params is None


def test_get_query_param() -> None:
    store, _ = _store()

    assert store.get_query_param("foo") == "1"
    assert store.get_query_param("missing") is None


def test_get_url_state_snapshot() -> None:
    store, notifications = _store()

    state = store.get_url_state()

    assert state.path == "/story/button--primary"
    assert state.view_mode == "story"
    assert state.story_id == "button--primary"
    assert state.query_params == {"foo": "1"}
    assert state.url == "/?path=/story/button--primary&foo=1"
    assert notifications == []


def test_none_value_is_a_noop() -> None:
    store, notifications = _store()
    before = store.get_url_state().query_params

    store.set_query_params({"x": None, "foo": None})

    assert store.get_url_state().query_params is before
    assert store.get_query_param("foo") == "1"
    assert notifications == []


def test_equal_update_notifies_once() -> None:
    store, notifications = _store()

    store.set_query_params({"bar": "2"})
    store.set_query_params({"bar": "2"})

    assert len(notifications) == 1
    assert notifications[0].query_params == {"foo": "1", "bar": "2"}


def test_setting_existing_value_does_not_notify() -> None:
    store, notifications = _store()

    store.set_query_params({"foo": "1"})

    assert notifications == []


def test_update_overwrites_and_merges() -> None:
    store, notifications = _store()

    store.set_query_params({"foo": "9", "bar": "2", "baz": None})

    assert store.get_url_state().query_params == {"foo": "9", "bar": "2"}
    assert len(notifications) == 1


def test_set_on_uninitialized_store() -> None:
    store = QueryParamStore()

    store.set_query_params({"foo": "1"})

    assert store.get_query_param("foo") == "1"


def test_unsubscribe_stops_notifications() -> None:
    store = QueryParamStore()
    notifications: list[UrlState] = []
    unsubscribe = store.subscribe(notifications.append)

    unsubscribe()
    store.set_query_params({"foo": "1"})

    assert notifications == []


def test_apply_initial_state_only_notifies_on_change() -> None:
    parser = LocationParser()
    store = QueryParamStore(parser.parse(Location.from_url("/?path=/story/a--b&foo=1")))
    notifications: list[UrlState] = []
    store.subscribe(notifications.append)
    params = store.get_url_state().query_params

    assert store.apply_initial_state(parser.parse(Location.from_url("/?path=/story/a--b&foo=1"))) is False
    assert notifications == []

    assert store.apply_initial_state(parser.parse(Location.from_url("/?path=/story/c--d&foo=1"))) is True
    assert len(notifications) == 1
    assert notifications[0].story_id == "c--d"
    assert notifications[0].query_params is params
