# zaya

A small Python client for the Zaya link shortener API. It covers your account,
shortened links, custom domains, spaces and per-link statistics.

## Installation

```
pip install zaya
```

## Quick start

```python
from zaya.client import Client
from zaya.models import CreateLinkParams, LinkListParams, StatsParams

client = Client(api_key="placeholder")

account = client.get_account()
print(account.email, account.name)

link = client.create_link(
    "https://example.com/a/very/long/path",
    CreateLinkParams(alias="launch", description="Launch page"),
)
print(link.id, link.alias)

for item in client.list_links(LinkListParams(search="launch", sort="desc")):
    print(item.id, item.url)

total = client.get_total_stats(link.id, StatsParams())
print(total.total)
```

## Configuration

Requests time out after 30 seconds by default and go to the public API base URL.
Both can be changed when the client is built or afterwards. The setters return
the client, so you can chain them:

```python
client = Client(api_key="placeholder").with_timeout(10).with_base_url("http://localhost:8080/api/v1")
```

## What you can call

- Account: `get_account`
- Links: `list_links`, `create_link`, `get_link`, `update_link`, `delete_link`
- Domains: `list_domains`, `create_domain`, `get_domain`, `update_domain`, `delete_domain`
- Spaces: `list_spaces`, `create_space`, `get_space`, `update_space`, `delete_space`
- Statistics for a link: `get_total_stats`, `get_click_stats`, `get_referrer_stats`,
  `get_country_stats`, `get_language_stats`, `get_browser_stats`,
  `get_device_stats`, `get_operating_system_stats`

The parameter and result types live in `zaya.models`. Examples are `Link`, `Domain`,
`Space`, `Account`, `CreateLinkParams`, `DomainListParams` and `StatsParams`.

## Errors

Every failure is raised as `zaya.transport.ZayaError`. This covers network
problems, bodies that cannot be encoded and responses that cannot be decoded.
When the server answers with status 400 or above, you get its subclass
`zaya.transport.APIError`. It carries the status and the response body.

```python
from zaya.transport import APIError

try:
    client.get_link(12345)
except APIError as exc:
    print("request failed:", exc)
```

## Running the tests

```
pip install -e ".[test]"
pytest
```