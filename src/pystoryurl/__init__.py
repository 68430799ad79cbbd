"""pystoryurl - URL state synchronisation for component preview UIs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystoryurl")
except PackageNotFoundError:
    __version__ = "0+local"
from pystoryurl.args_codec import coerce_args, decode_args, encode_args
from pystoryurl.args_sync import ArgsSyncEngine, StoryApi
from pystoryurl.client import HostApi, StoryUrlClient
from pystoryurl.config import StoryUrlConfig
from pystoryurl.csf import sanitize, to_id
from pystoryurl.exceptions import (
    InvalidStoryIdError,
    NavigationError,
    StoryUrlConfigError,
    StoryUrlError,
)
from pystoryurl.ingestion.location import InitialState, LocationParser, parse_location
from pystoryurl.models import (
    ArgsUpdated,
    LayoutAdditions,
    Location,
    NavigateOptions,
    PanelPosition,
    StoryEntry,
)
from pystoryurl.navigation import NavigationBridge, Router
from pystoryurl.state.events import CoreEvent, EventSource
from pystoryurl.state.store import QueryParamStore, UrlState

__all__ = [
    "__version__",
    "ArgsSyncEngine",
    "ArgsUpdated",
    "CoreEvent",
    "EventSource",
    "HostApi",
    "InitialState",
    "InvalidStoryIdError",
    "LayoutAdditions",
    "Location",
    "LocationParser",
    "NavigateOptions",
    "NavigationBridge",
    "NavigationError",
    "PanelPosition",
    "QueryParamStore",
    "Router",
    "StoryApi",
    "StoryEntry",
    "StoryUrlClient",
    "StoryUrlConfig",
    "StoryUrlConfigError",
    "StoryUrlError",
    "UrlState",
    "coerce_args",
    "decode_args",
    "encode_args",
    "parse_location",
    "sanitize",
    "to_id",
]
