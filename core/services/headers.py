"""
Response header helpers.

Write operations attach alert headers naming the affected entity so a
client can show a notification without parsing the body.  List
responses carry the total row count and RFC 5988 ``Link`` entries.
"""
from __future__ import annotations

from typing import Dict

from django.conf import settings

from .repository import Page


def app_name() -> str:
    return getattr(settings, 'ALERT_APP_NAME', 'hospitalManagementApp')


def create_alert(message: str, param: str) -> Dict[str, str]:
    name = app_name()
    return {
        f'X-{name}-alert': message,
        f'X-{name}-params': param,
    }


def entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f'{app_name()}.{entity_name}.created', param)


def entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f'{app_name()}.{entity_name}.updated', param)


def entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f'{app_name()}.{entity_name}.deleted', param)


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    name = app_name()
    return {
        f'X-{name}-error': f'error.{error_key}',
        f'X-{name}-params': entity_name,
    }


def _page_uri(base_url: str, page: int, size: int) -> str:
    return f'{base_url}?page={page}&size={size}'


def pagination_headers(page: Page, base_url: str) -> Dict[str, str]:
    links = []
    if page.has_next:
        links.append(f'<{_page_uri(base_url, page.page + 1, page.size)}>; rel="next"')
    if page.has_previous:
        links.append(f'<{_page_uri(base_url, page.page - 1, page.size)}>; rel="prev"')
    last_page = max(page.total_pages - 1, 0)
    links.append(f'<{_page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{_page_uri(base_url, 0, page.size)}>; rel="first"')
    return {
        'X-Total-Count': str(page.total),
        'Link': ','.join(links),
    }
