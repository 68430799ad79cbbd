"""Navigation bridge to the host router."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import ValidationError

from pystoryurl.exceptions import NavigationError
from pystoryurl.models.navigation import NavigateOptions
from pystoryurl.state.events import CoreEvent, EventSource

_logger = logging.getLogger(__name__)


class Router(Protocol):
    """Structural router interface.

    The host owns history handling; pystoryurl only asks it to go somewhere.
    """

    def navigate(self, url: str, options: NavigateOptions) -> None: ...


def _coerce_options(options: NavigateOptions | Mapping[str, Any] | None) -> NavigateOptions:
    if options is None:
        return NavigateOptions()
    if isinstance(options, NavigateOptions):
        return options
    return NavigateOptions.model_validate(dict(options))


class NavigationBridge:
    """Forwards navigation requests to a :class:`Router`.

    Keeps no state besides the base path used for route-scheme URLs.
    """

    def __init__(self, router: Router, *, base_path: str = "/") -> None:
        self._router = router
        self._base_path = base_path

    def navigate_url(self, url: str, options: NavigateOptions | Mapping[str, Any] | None = None) -> None:
        """Navigate to *url* exactly as given."""
        opts = _coerce_options(options)
        _logger.debug("Navigating url=%s replace=%s", url, opts.replace)
        try:
            self._router.navigate(url, opts)
        except NavigationError:
            raise
        except Exception as exc:
            raise NavigationError(f"Router failed to navigate to {url!r}: {exc}", url=url) from exc

    def navigate(self, to: str, options: NavigateOptions | Mapping[str, Any] | None = None) -> None:
        """Navigate to route *to*, e.g. ``/story/button--primary``.

        The route is wrapped as ``{base_path}?path={to}`` unless
        ``options.plain`` is set.
        """
        opts = _coerce_options(options)
        url = to if opts.plain else f"{self._base_path}?path={to}"
        self.navigate_url(url, opts)

    def _on_navigate_url(self, url: str, options: NavigateOptions | Mapping[str, Any] | None = None) -> None:
        try:
            opts = _coerce_options(options)
        except (ValidationError, TypeError, ValueError) as exc:
            _logger.warning("Ignoring %s with malformed options %r: %s", CoreEvent.NAVIGATE_URL, options, exc)
            return
        self.navigate_url(url, opts)

    def register(self, events: EventSource) -> None:
        """Forward ``navigateUrl`` events from *events* to the router."""
        events.on(CoreEvent.NAVIGATE_URL, self._on_navigate_url)
