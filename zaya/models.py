"""Data types exchanged with the Zaya API and their JSON mappings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_time(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; None stays None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid RFC 3339 time: {value!r}")
    match = _RFC3339.match(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 time: {value!r}")
    date, clock, fraction, zone = match.groups()
    micro = (fraction or "")[:6].ljust(6, "0")
    if zone in ("Z", "z"):
        zone = "+00:00"
    return datetime.fromisoformat(f"{date}T{clock}.{micro}{zone}")


def format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    return 0 if value is None else int(value)


def _bool(data: Mapping[str, Any], key: str) -> bool:
    return bool(data.get(key))


def _is_empty(value: Any) -> bool:
    return value is None or value is False or value == "" or (
        isinstance(value, int) and not isinstance(value, bool) and value == 0
    )


def _omit_empty(fields: Mapping[str, Any]) -> dict[str, Any]:
    result = {}
    for key, value in fields.items():
        if _is_empty(value):
            continue
        result[key] = format_time(value) if isinstance(value, datetime) else value
    return result


@dataclass
class Account:
    id: int = 0
    email: str = ""
    name: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Account:
        return cls(
            id=_int(data, "id"),
            email=_str(data, "email"),
            name=_str(data, "name"),
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


@dataclass
class Domain:
    id: int = 0
    name: str = ""
    index_page: str = ""
    not_found_page: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Domain:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            index_page=_str(data, "index_page"),
            not_found_page=_str(data, "not_found_page"),
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


@dataclass
class DomainListParams:
    search: str = ""
    sort: str = ""  # desc, asc

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"search": self.search, "sort": self.sort})


@dataclass
class CreateDomainParams:
    name: str
    index_page: str = ""
    not_found_page: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            **_omit_empty(
                {"index_page": self.index_page, "not_found_page": self.not_found_page}
            ),
        }


@dataclass
class Link:
    id: int = 0
    url: str = ""
    alias: str = ""
    password: str = ""
    space: int = 0
    domain: int = 0
    disabled: bool = False
    public: bool = False
    description: str = ""
    expiration_url: str = ""
    expiration_date: datetime | None = None
    expiration_time: str = ""
    expiration_clicks: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Link:
        return cls(
            id=_int(data, "id"),
            url=_str(data, "url"),
            alias=_str(data, "alias"),
            password=_str(data, "password"),
            space=_int(data, "space"),
            domain=_int(data, "domain"),
            disabled=_bool(data, "disabled"),
            public=_bool(data, "public"),
            description=_str(data, "description"),
            expiration_url=_str(data, "expiration_url"),
            expiration_date=parse_time(data.get("expiration_date")),
            expiration_time=_str(data, "expiration_time"),
            expiration_clicks=_int(data, "expiration_clicks"),
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


@dataclass
class LinkListParams:
    search: str = ""
    by: str = ""  # title, alias, url
    ids: str = ""
    status: int = 0
    space: int = 0
    domain: int = 0
    favorites: bool = False
    sort: str = ""  # desc, asc, max, min

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "search": self.search,
                "by": self.by,
                "ids": self.ids,
                "status": self.status,
                "space": self.space,
                "domain": self.domain,
                "favorites": self.favorites,
                "sort": self.sort,
            }
        )


@dataclass
class CreateLinkParams:
    alias: str = ""
    password: str = ""
    space: int = 0
    domain: int = 0
    disabled: bool = False
    public: bool = False
    description: str = ""
    expiration_url: str = ""
    expiration_date: datetime | None = None
    expiration_time: str = ""
    expiration_clicks: int = 0

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "alias": self.alias,
                "password": self.password,
                "space": self.space,
                "domain": self.domain,
                "disabled": self.disabled,
                "public": self.public,
                "description": self.description,
                "expiration_url": self.expiration_url,
                "expiration_date": self.expiration_date,
                "expiration_time": self.expiration_time,
                "expiration_clicks": self.expiration_clicks,
            }
        )


@dataclass
class Space:
    id: int = 0
    name: str = ""
    color: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Space:
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            color=_str(data, "color"),
            created_at=parse_time(data.get("created_at")),
            updated_at=parse_time(data.get("updated_at")),
        )


@dataclass
class SpaceListParams:
    search: str = ""
    sort: str = ""  # desc, asc

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"search": self.search, "sort": self.sort})


@dataclass
class CreateSpaceParams:
    name: str
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "color": self.color}


@dataclass
class StatsParams:
    date_from: datetime | None = None
    date_to: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return _omit_empty({"from": self.date_from, "to": self.date_to})


@dataclass
class TotalStats:
    total: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TotalStats:
        return cls(total=_int(data, "total"))


@dataclass
class ClickStats:
    date: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClickStats:
        return cls(date=_str(data, "date"), clicks=_int(data, "clicks"))


@dataclass
class ReferrerStats:
    referrer: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReferrerStats:
        return cls(referrer=_str(data, "referrer"), clicks=_int(data, "clicks"))


@dataclass
class CountryStats:
    country: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CountryStats:
        return cls(country=_str(data, "country"), clicks=_int(data, "clicks"))


@dataclass
class LanguageStats:
    language: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LanguageStats:
        return cls(language=_str(data, "language"), clicks=_int(data, "clicks"))


@dataclass
class BrowserStats:
    browser: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BrowserStats:
        return cls(browser=_str(data, "browser"), clicks=_int(data, "clicks"))


@dataclass
class DeviceStats:
    device: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeviceStats:
        return cls(device=_str(data, "device"), clicks=_int(data, "clicks"))


@dataclass
class OperatingSystemStats:
    os: str = ""
    clicks: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OperatingSystemStats:
        return cls(os=_str(data, "os"), clicks=_int(data, "clicks"))