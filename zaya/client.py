"""High-level client for the Zaya link-shortening API."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Mapping, TypeVar

from .models import (
    Account,
    BrowserStats,
    ClickStats,
    CountryStats,
    CreateDomainParams,
    CreateLinkParams,
    CreateSpaceParams,
    DeviceStats,
    Domain,
    DomainListParams,
    LanguageStats,
    LanguageStats as _LanguageStats,  # noqa: F401
    Link,
    LinkListParams,
    OperatingSystemStats,
    ReferrerStats,
    Space,
    SpaceListParams,
    StatsParams,
    TotalStats,
)
from .transport import BASE_URL, DEFAULT_TIMEOUT, Transport, ZayaError

T = TypeVar("T")


def _one(decode: Callable[[Mapping[str, Any]], T], data: Any) -> T:
    if data is None:
        return decode({})
    if not isinstance(data, Mapping):
        raise ZayaError(
            f"failed to decode response: expected an object, got {type(data).__name__}"
        )
    return decode(data)


def _many(decode: Callable[[Mapping[str, Any]], T], data: Any) -> list[T]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ZayaError(
            f"failed to decode response: expected an array, got {type(data).__name__}"
        )
    return [_one(decode, item) for item in data]


class Client:
    """Client for the Zaya API: accounts, domains, links, spaces and statistics."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float | timedelta = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = Transport(api_key, base_url, timeout)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        return self._transport.timeout

    def with_timeout(self, timeout: float | timedelta) -> Client:
        """Set the request timeout and return this client."""
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._transport.timeout = float(timeout)
        return self

    def with_base_url(self, url: str) -> Client:
        """Set the API base URL and return this client."""
        self._transport.base_url = url
        return self

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _call(self, method: str, path: str, body: Any = None) -> Any:
        return self._transport.request(method, path, body)

    # Account

    def get_account(self) -> Account:
        """Retrieve the current account details."""
        return _one(Account.from_dict, self._call("GET", "/account"))

    # Domains

    def list_domains(self, params: DomainListParams | None = None) -> list[Domain]:
        params = params or DomainListParams()
        return _many(Domain.from_dict, self._call("GET", "/domains", params.to_dict()))

    def create_domain(self, params: CreateDomainParams) -> Domain:
        return _one(Domain.from_dict, self._call("POST", "/domains", params.to_dict()))

    def get_domain(self, domain_id: int) -> Domain:
        return _one(Domain.from_dict, self._call("GET", f"/domains/{domain_id}"))

    def update_domain(self, domain_id: int, params: CreateDomainParams) -> Domain:
        return _one(
            Domain.from_dict,
            self._call("PUT", f"/domains/{domain_id}", params.to_dict()),
        )

    def delete_domain(self, domain_id: int) -> None:
        self._call("DELETE", f"/domains/{domain_id}")

    # Links

    def list_links(self, params: LinkListParams | None = None) -> list[Link]:
        params = params or LinkListParams()
        return _many(Link.from_dict, self._call("GET", "/links", params.to_dict()))

    def create_link(self, url: str, params: CreateLinkParams | None = None) -> Link:
        """Shorten ``url``; only the options that are set are sent."""
        params = params or CreateLinkParams()
        body = {"url": url, **params.to_dict()}
        return _one(Link.from_dict, self._call("POST", "/links", body))

    def get_link(self, link_id: int) -> Link:
        return _one(Link.from_dict, self._call("GET", f"/links/{link_id}"))

    def update_link(self, link_id: int, params: CreateLinkParams) -> Link:
        return _one(
            Link.from_dict, self._call("PUT", f"/links/{link_id}", params.to_dict())
        )

    def delete_link(self, link_id: int) -> None:
        self._call("DELETE", f"/links/{link_id}")

    # Spaces

    def list_spaces(self, params: SpaceListParams | None = None) -> list[Space]:
        params = params or SpaceListParams()
        return _many(Space.from_dict, self._call("GET", "/spaces", params.to_dict()))

    def create_space(self, params: CreateSpaceParams) -> Space:
        return _one(Space.from_dict, self._call("POST", "/spaces", params.to_dict()))

    def get_space(self, space_id: int) -> Space:
        return _one(Space.from_dict, self._call("GET", f"/spaces/{space_id}"))

    def update_space(self, space_id: int, params: CreateSpaceParams) -> Space:
        return _one(
            Space.from_dict, self._call("PUT", f"/spaces/{space_id}", params.to_dict())
        )

    def delete_space(self, space_id: int) -> None:
        self._call("DELETE", f"/spaces/{space_id}")

    # Statistics

    def _stats(self, link_id: int, kind: str, params: StatsParams | None) -> Any:
        params = params or StatsParams()
        return self._call("GET", f"/links/{link_id}/stats/{kind}", params.to_dict())

    def get_total_stats(self, link_id: int, params: StatsParams | None = None) -> TotalStats:
        return _one(TotalStats.from_dict, self._stats(link_id, "total", params))

    def get_click_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[ClickStats]:
        return _many(ClickStats.from_dict, self._stats(link_id, "clicks", params))

    def get_referrer_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[ReferrerStats]:
        return _many(ReferrerStats.from_dict, self._stats(link_id, "referrers", params))

    def get_country_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[CountryStats]:
        return _many(CountryStats.from_dict, self._stats(link_id, "countries", params))

    def get_language_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[LanguageStats]:
        return _many(LanguageStats.from_dict, self._stats(link_id, "languages", params))

    def get_browser_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[BrowserStats]:
        return _many(BrowserStats.from_dict, self._stats(link_id, "browsers", params))

    def get_device_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[DeviceStats]:
        return _many(DeviceStats.from_dict, self._stats(link_id, "devices", params))

    def get_operating_system_stats(
        self, link_id: int, params: StatsParams | None = None
    ) -> list[OperatingSystemStats]:
        return _many(OperatingSystemStats.from_dict, self._stats(link_id, "os", params))