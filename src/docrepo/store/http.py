"""HTTP document store client.

This module provides a thin client for an Elasticsearch-compatible REST
endpoint. It maps the DocumentStoreClient port onto the document and index
APIs and translates error responses into docrepo exceptions. Transport
failures and timeouts raised by httpx propagate unchanged.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
from loguru import logger

from ..core.config import StoreConfig
from ..core.exceptions import CollectionExistsError, CollectionNotFoundError, StoreError


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _json_or_text(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_type(body: Any) -> str | None:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("type")
    return None


class HttpDocumentStore:
    """Document store client over HTTP.

    Example:
        store = HttpDocumentStore(StoreConfig(url="http://localhost:9200"))
        store.index("people", "_doc", {"name": "Ada"}, id="1")
        store.get("people", "_doc", "1")["_source"]

    The underlying ``httpx.Client`` is created eagerly but opens no
    connection until the first request.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize HTTP store client.

        Args:
            config: Connection settings; defaults to ``StoreConfig()``.
            transport: Optional httpx transport, mainly for tests.
        """
        self._config = config or StoreConfig()
        self._client = httpx.Client(
            base_url=self._config.url.rstrip("/"),
            timeout=self._config.timeout,
            headers={"Content-Type": "application/json", **self._config.headers},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL."""
        return self._config.url.rstrip("/")

    def __repr__(self) -> str:
        return f"HttpDocumentStore(url={self.base_url!r})"

    def __enter__(self) -> "HttpDocumentStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def get(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        response = self._request(
            "GET", f"/{_segment(collection)}/{_segment(kind)}/{_segment(id)}", params=params
        )
        body = _json_or_text(response)
        if response.status_code == 404 and _error_type(body) is None:
            return body if isinstance(body, dict) else self._missing(collection, kind, id)
        self._raise_for_error(response, body, collection)
        return body

    def multi_get(
        self, collection: str, kind: str, ids: list[str], **params: Any
    ) -> list[dict[str, Any]]:
        response = self._request(
            "POST",
            f"/{_segment(collection)}/{_segment(kind)}/_mget",
            params=params,
            json={"ids": [str(id) for id in ids]},
        )
        body = _json_or_text(response)
        self._raise_for_error(response, body, collection)
        if not isinstance(body, dict) or not isinstance(body.get("docs"), list):
            raise StoreError("Malformed multi-get response", status=response.status_code, body=body)
        return body["docs"]

    def exists(self, collection: str, kind: str, id: str, **params: Any) -> bool:
        response = self._request(
            "HEAD", f"/{_segment(collection)}/{_segment(kind)}/{_segment(id)}", params=params
        )
        if response.status_code == 404:
            return False
        self._raise_for_error(response, None, collection)
        return True

    def index(
        self,
        collection: str,
        kind: str,
        document: dict[str, Any],
        id: str | None = None,
        **params: Any,
    ) -> dict[str, Any]:
        if id is None:
            method, path = "POST", f"/{_segment(collection)}/{_segment(kind)}"
        else:
            method, path = "PUT", f"/{_segment(collection)}/{_segment(kind)}/{_segment(id)}"

        response = self._request(method, path, params=params, json=document)
        body = _json_or_text(response)
        self._raise_for_error(response, body, collection)
        return body

    def update(
        self, collection: str, kind: str, id: str, fields: dict[str, Any], **params: Any
    ) -> dict[str, Any]:
        response = self._request(
            "POST",
            f"/{_segment(collection)}/{_segment(kind)}/{_segment(id)}/_update",
            params=params,
            json={"doc": fields},
        )
        body = _json_or_text(response)
        if response.status_code == 404 and _error_type(body) == "document_missing_exception":
            return {"_index": collection, "_type": kind, "_id": str(id), "result": "not_found"}
        self._raise_for_error(response, body, collection)
        return body

    def delete(self, collection: str, kind: str, id: str, **params: Any) -> dict[str, Any]:
        response = self._request(
            "DELETE", f"/{_segment(collection)}/{_segment(kind)}/{_segment(id)}", params=params
        )
        body = _json_or_text(response)
        if response.status_code == 404 and _error_type(body) is None:
            return body if isinstance(body, dict) else {"_id": str(id), "result": "not_found"}
        self._raise_for_error(response, body, collection)
        return body

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def create_collection(self, collection: str, body: dict[str, Any] | None = None) -> None:
        response = self._request("PUT", f"/{_segment(collection)}", json=body or {})
        self._raise_for_error(response, _json_or_text(response), collection)

    def delete_collection(self, collection: str) -> None:
        response = self._request("DELETE", f"/{_segment(collection)}")
        self._raise_for_error(response, _json_or_text(response), collection)

    def collection_exists(self, collection: str) -> bool:
        response = self._request("HEAD", f"/{_segment(collection)}")
        if response.status_code == 404:
            return False
        self._raise_for_error(response, None, collection)
        return True

    def refresh_collection(self, collection: str) -> None:
        response = self._request("POST", f"/{_segment(collection)}/_refresh")
        self._raise_for_error(response, _json_or_text(response), collection)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        params = kwargs.pop("params", None) or None
        logger.debug(f"{method} {self.base_url}{path} params={params!r}")
        response = self._client.request(method, path, params=params, **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    @staticmethod
    def _missing(collection: str, kind: str, id: str) -> dict[str, Any]:
        return {"_index": collection, "_type": kind, "_id": str(id), "found": False}

    @staticmethod
    def _raise_for_error(response: httpx.Response, body: Any, collection: str) -> None:
        if response.is_success:
            return

        error_type = _error_type(body)
        if error_type == "index_not_found_exception" or (
            response.status_code == 404 and body is None
        ):
            raise CollectionNotFoundError(collection, body=body)
        if error_type == "resource_already_exists_exception":
            raise CollectionExistsError(collection, body=body)

        raise StoreError(
            f"Store request failed: {response.request.method} {response.request.url.path} "
            f"-> {response.status_code}",
            status=response.status_code,
            body=body,
        )
