"""Client for the Genderize.io web service.

Names are sent in batches of at most BATCH_SIZE per request, one request at a
time, and the per-batch results are joined back in input order.
"""
from __future__ import annotations
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import TypeAdapter

from genderize.common.errors import ConfigurationError, ServerError
from genderize.common.schema import NameRecord, Query, RateLimit, Response

LOGGER = logging.getLogger("genderize.client")

VERSION = "0.2.0"

DEFAULT_SERVER = "https://api.genderize.io/"
DEFAULT_USER_AGENT = f"genderize-python/{VERSION}"

# The API rejects requests with more names than this.
BATCH_SIZE = 10

_RECORDS = TypeAdapter(list[NameRecord])

@dataclass(frozen=True)
class Config:
    """Client settings. Empty or missing values select the defaults."""
    user_agent: str = ""
    api_key: str = ""
    server: str = ""
    http_client: httpx.Client | None = None


class Client:
    """Client for the Genderize API. Read-only once constructed."""

    def __init__(self, config: Config | None = None) -> None:
        config = config or Config()
        self._user_agent = config.user_agent or DEFAULT_USER_AGENT
        self._api_key = config.api_key
        self._http_client = config.http_client
        self._api_url = _parse_server(config.server or DEFAULT_SERVER)

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_url(self) -> httpx.URL:
        return self._api_url

    def get(self, query: Query) -> list[Response]:
        """
        Get gender info for names with optional country and language ids.

        Args:
            query: Names plus optional country/language ids.

        Returns:
            One Response per name, in the order the names were given.

        Raises:
            ServerError: The API replied with a non-2xx status.
            httpx.HTTPError: The request could not be completed.
            ValueError: A 2xx body could not be decoded.
        """
        names = _as_name_list(query.names)
        if not names:
            return []

        if self._http_client is not None:
            return self._get_batches(self._http_client, query, names)
        with httpx.Client(follow_redirects=True) as http:
            return self._get_batches(http, query, names)

    def _get_batches(self, http: httpx.Client, query: Query, names: list[str]) -> list[Response]:
        responses: list[Response] = []
        for index, batch in enumerate(iter_batches(names, BATCH_SIZE)):
            LOGGER.debug("Requesting batch %d (%d names)", index, len(batch))
            responses.extend(self._get_batch(http, batch, query.country_id, query.language_id))
        return responses

    def _get_batch(
        self,
        http: httpx.Client,
        names: list[str],
        country_id: str,
        language_id: str,
    ) -> list[Response]:
        params = build_params(names, self._api_key, country_id, language_id)
        resp = http.get(self._api_url, params=params, headers={"User-Agent": self._user_agent})

        if not resp.is_success:
            err = ServerError(
                message=_parse_error_message(resp),
                status_code=resp.status_code,
                rate_limit=_parse_rate_limit(resp.headers),
            )
            LOGGER.warning("Genderize API error %s: %s", err.status_code, err.message)
            raise err

        return decode_records(resp.json(), len(names))


def iter_batches(names: Sequence[str], size: int = BATCH_SIZE) -> Iterator[list[str]]:
    """Yield consecutive slices of at most ``size`` names."""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    for start in range(0, len(names), size):
        yield list(names[start:start + size])

def build_params(
    names: Sequence[str],
    api_key: str = "",
    country_id: str = "",
    language_id: str = "",
) -> list[tuple[str, str]]:
    """
    Build URL query params for one batch.

    The name parameter repeats once per name; the rest are only added when set.
    """
    params = [("name[]", name) for name in names]
    if api_key:
        params.append(("apikey", api_key))
    if country_id:
        params.append(("country_id", country_id))
    if language_id:
        params.append(("language_id", language_id))
    return params

def decode_records(payload: Any, expected: int) -> list[Response]:
    """
    Map a decoded 2xx body onto Responses.

    A list of records is tried first. A single object is accepted only when
    one name was requested, since the API answers single-name queries that way.

    Args:
        payload: Decoded JSON body.
        expected: Number of names in the batch.

    Raises:
        ValueError: The body does not hold one record per requested name.
    """
    if isinstance(payload, dict) and expected == 1:
        payload = [payload]
    records = _RECORDS.validate_python(payload)
    if len(records) != expected:
        raise ValueError(f"Expected {expected} records from Genderize API, got {len(records)}")
    return [record.to_response() for record in records]

def _parse_server(server: str) -> httpx.URL:
    try:
        url = httpx.URL(server)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid server URL {server!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Invalid server URL {server!r}: expected an absolute http(s) URL")
    return url

def _parse_error_message(resp: httpx.Response) -> str:
    """Return the body's ``error`` field, or "" if the body has none."""
    try:
        data = resp.json()
    except ValueError:
        return ""
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return ""

def _parse_header_int(value: str | None) -> int | None:
    """Parse a plain base-10 integer with an optional sign, else None."""
    if value is None:
        return None
    digits = value[1:] if value[:1] in ("+", "-") else value
    # int() alone would also take whitespace, underscores and non-ASCII digits.
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(value)

def _parse_rate_limit(headers: httpx.Headers) -> RateLimit | None:
    """Return a RateLimit if all three rate limit headers parse as integers."""
    limit = _parse_header_int(headers.get("X-Rate-Limit-Limit"))
    remaining = _parse_header_int(headers.get("X-Rate-Limit-Remaining"))
    reset = _parse_header_int(headers.get("X-Rate-Reset"))
    if limit is None or remaining is None or reset is None:
        return None
    return RateLimit(limit=limit, remaining=remaining, reset=reset)

def _as_name_list(names: Sequence[str]) -> list[str]:
    if isinstance(names, str):
        raise TypeError("names must be a sequence of strings, not a single str")
    return list(names)


_default_client = Client(Config())

def get(names: Sequence[str]) -> list[Response]:
    """Get gender info for names using the default client and no country/language ids."""
    return _default_client.get(Query(names=_as_name_list(names)))
