"""Minimal HAL+JSON document builders.

A resource is a plain dict of properties plus ``_links``; a collection adds
``_embedded`` members and, for paged listings, a ``page`` block.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from .pagination import Page, PageRequest


def link(href: str, *, templated: bool = False) -> Dict[str, Any]:
    out: Dict[str, Any] = {"href": href}
    if templated:
        out["templated"] = True
    return out


def resource(properties: Mapping[str, Any], links: Mapping[str, Dict[str, Any]]) -> Dict[str, Any]:
    body = dict(properties)
    body["_links"] = dict(links)
    return body


def page_links(page: Page, href_for: Callable[[PageRequest], str]) -> Dict[str, Dict[str, Any]]:
    links: Dict[str, Dict[str, Any]] = {}
    if page.total_pages > 1:
        links["first"] = link(href_for(page.request.at(0)))
    if page.has_previous:
        links["prev"] = link(href_for(page.request.previous()))
    links["self"] = link(href_for(page.request))
    if page.has_next:
        links["next"] = link(href_for(page.request.next()))
    if page.total_pages > 1:
        links["last"] = link(href_for(page.request.at(page.total_pages - 1)))
    return links


def paged_collection(
    rel: str,
    members: Iterable[Dict[str, Any]],
    page: Page,
    href_for: Callable[[PageRequest], str],
    *,
    extra_links: Optional[Mapping[str, Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    links = page_links(page, href_for)
    links.update(extra_links or {})
    return {
        "_embedded": {rel: list(members)},
        "_links": links,
        "page": {
            "size": page.size,
            "totalElements": page.total_elements,
            "totalPages": page.total_pages,
            "number": page.number,
        },
    }
