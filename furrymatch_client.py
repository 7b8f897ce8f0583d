"""FurryMatch API client.

A thin wrapper around the FurryMatch REST API using the ``requests``
library.  It mirrors the services of the generated web frontend: one
:class:`EntityClient` per resource with ``create``, ``update``,
``partial_update``, ``find``, ``query`` and ``delete``.

:class:`DeleteDialog` reproduces the frontend's delete confirmation
dialog: ``cancel`` dismisses it, ``confirm_delete`` deletes the entity
and closes the dialog with :data:`ITEM_DELETED_EVENT` once the server
has confirmed.

Every call returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is ``None`` (or empty) and ``error``
is a dictionary with ``status_code``, ``message`` and ``error_key``.

Example::

    api = FurryMatchAPI(base_url="http://localhost:8080")
    api.authenticate("anna", "secret")
    owner, error = api.owners.create({"first_name": "Anna"})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ITEM_DELETED_EVENT = "deleted"

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"

Error = Dict[str, Any]


@dataclass
class QueryResult:
    """One page of entities together with the server-side total."""

    items: List[Dict[str, Any]]
    total_count: int


class FurryMatchAPI:
    """Client for the FurryMatch API.

    Authentication is optional at construction time: pass ``api_key``
    to reuse an existing token, or call :meth:`authenticate` to obtain
    one.  The token is sent as ``Authorization: Bearer <token>``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout
        self.owners = EntityClient(self, "owners")
        self.pets = EntityClient(self, "pets")
        self.photos = EntityClient(self, "photos")

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def send(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        content_type: Optional[str] = None,
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request against ``/api`` + ``path``.

        Returns ``(response, None)`` for 2xx answers and
        ``(None, error)`` otherwise.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if content_type:
            headers["Content-Type"] = content_type
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            error = self._error_from_response(exc)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc), "error_key": None}

    @staticmethod
    def _error_from_response(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        error_key = None
        if response is not None:
            try:
                err_json = response.json()
            except ValueError:
                message = response.text
            else:
                if isinstance(err_json, dict):
                    message = err_json.get("title") or err_json.get("detail") or str(err_json)
                    error_key = err_json.get("errorKey")
                else:
                    message = str(err_json)
        return {"status_code": status, "message": message or str(exc), "error_key": error_key}

    def request_json(self, method: str, path: str, **kwargs: Any) -> Tuple[Optional[Any], Optional[Error]]:
        response, error = self.send(method, path, **kwargs)
        if error:
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def authenticate(self, login: str, password: str) -> Tuple[Optional[str], Optional[Error]]:
        """Obtain a token and use it for all following requests."""
        data, error = self.request_json(
            "POST", "/authenticate", json_body={"login": login, "password": password}
        )
        if error:
            return None, error
        self.api_key = data["id_token"]
        return self.api_key, None

    def register(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.request_json("POST", "/register", json_body=payload)

    def account(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.request_json("GET", "/account")


class EntityClient:
    """CRUD calls for one resource, e.g. ``/api/owners``."""

    def __init__(self, api: FurryMatchAPI, resource: str) -> None:
        self.api = api
        self.resource_path = f"/{resource}"

    def create(self, entity: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.api.request_json("POST", self.resource_path, json_body=entity)

    def update(self, entity: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.api.request_json("PUT", f"{self.resource_path}/{entity['id']}", json_body=entity)

    def partial_update(self, entity: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Send only the fields to change; ``entity`` must include ``id``."""
        return self.api.request_json(
            "PATCH",
            f"{self.resource_path}/{entity['id']}",
            json_body=entity,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def find(self, entity_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.api.request_json("GET", f"{self.resource_path}/{entity_id}")

    def query(
        self,
        page: int = 0,
        size: int = 20,
        sort: Optional[List[str]] = None,
    ) -> Tuple[QueryResult, Optional[Error]]:
        params: Dict[str, Any] = {"page": page, "size": size}
        if sort:
            params["sort"] = sort
        response, error = self.api.send("GET", self.resource_path, params=params)
        if error:
            return QueryResult(items=[], total_count=0), error
        items = response.json() if response.content else []
        total = int(response.headers.get("X-Total-Count", len(items)))
        return QueryResult(items=items, total_count=total), None

    def delete(self, entity_id: int) -> Tuple[bool, Optional[Error]]:
        response, error = self.api.send("DELETE", f"{self.resource_path}/{entity_id}")
        if error:
            return False, error
        return True, None


class DeleteDialog:
    """Delete confirmation for a single entity.

    ``on_close`` receives :data:`ITEM_DELETED_EVENT` after a successful
    delete; ``on_dismiss`` is called when the user cancels.  A failed
    delete leaves the dialog open and returns the error.
    """

    def __init__(
        self,
        client: EntityClient,
        on_close: Callable[[str], None],
        on_dismiss: Callable[[], None],
    ) -> None:
        self.client = client
        self.on_close = on_close
        self.on_dismiss = on_dismiss
        self.is_open = True

    def cancel(self) -> None:
        self.is_open = False
        self.on_dismiss()

    def confirm_delete(self, entity_id: int) -> Optional[Error]:
        deleted, error = self.client.delete(entity_id)
        if not deleted:
            return error
        self.is_open = False
        self.on_close(ITEM_DELETED_EVENT)
        return None
