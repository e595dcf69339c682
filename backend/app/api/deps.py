"""
Request-scoped dependencies.

The storage backend and webhook relay live on app.state so each app
instance (and each test) owns its own.
"""

from fastapi import Request

from app.db.repository import Storage
from app.services.webhook import WebhookRelay


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_webhook_relay(request: Request) -> WebhookRelay:
    return request.app.state.webhook_relay
