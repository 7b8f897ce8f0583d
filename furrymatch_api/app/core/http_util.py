"""
Response helpers shared by all entity resources.

* Alert headers (``X-<app>-alert`` / ``X-<app>-error`` and
  ``X-<app>-params``) let the frontend display a translated
  notification after a create, update or delete.
* Pagination headers expose the total number of rows
  (``X-Total-Count``) and RFC 5988 ``Link`` relations for the
  first, previous, next and last pages.
* ``wrap_or_not_found`` turns an optional result into the value or an
  HTTP 404.
"""

from typing import Dict, Optional, TypeVar
from urllib.parse import quote

from fastapi import HTTPException, status
from starlette.datastructures import URL

T = TypeVar("T")

TOTAL_COUNT_HEADER = "X-Total-Count"


def create_alert(application_name: str, message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }


def create_entity_creation_alert(application_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(application_name, f"{application_name}.{entity_name}.created", param)


def create_entity_update_alert(application_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(application_name, f"{application_name}.{entity_name}.updated", param)


def create_entity_deletion_alert(application_name: str, entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(application_name, f"{application_name}.{entity_name}.deleted", param)


def create_failure_alert(application_name: str, entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{application_name}-error": f"error.{error_key}",
        f"X-{application_name}-params": entity_name,
    }


def _prepare_link(url: URL, page_number: int, page_size: int, relation: str) -> str:
    link = str(url.include_query_params(page=page_number, size=page_size))
    link = link.replace(",", "%2C").replace(";", "%3B")
    return f'<{link}>; rel="{relation}"'


def generate_pagination_headers(url: URL, page) -> Dict[str, str]:
    """Build ``X-Total-Count`` and ``Link`` headers for ``page``.

    ``url`` is the URL of the current request; the ``page`` and
    ``size`` query parameters are replaced for each relation while
    other parameters (such as ``sort``) are kept.  ``next`` is only
    emitted when a following page exists and ``prev`` only when the
    current page is not the first.
    """
    links = []
    if page.number + 1 < page.total_pages:
        links.append(_prepare_link(url, page.number + 1, page.size, "next"))
    if page.number > 0:
        links.append(_prepare_link(url, page.number - 1, page.size, "prev"))
    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    links.append(_prepare_link(url, last_page, page.size, "last"))
    links.append(_prepare_link(url, 0, page.size, "first"))
    return {
        TOTAL_COUNT_HEADER: str(page.total_elements),
        "Link": ",".join(links),
    }


def wrap_or_not_found(value: Optional[T], detail: str = "Not Found") -> T:
    """Return ``value`` or raise HTTP 404 when it is ``None``."""
    if value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return value
