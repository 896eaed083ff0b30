"""Admin session flag for the results-entry screens.

This gates the demo admin pages; it is not an authentication system.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare

from .storage import KeyValueStore

logger = logging.getLogger(__name__)

AUTH_KEY = "sportiva_admin_session"


def login(kv: KeyValueStore, password: str) -> bool:
    """Set the admin flag when ``password`` matches the configured one."""

    expected = getattr(settings, "SPORTSMEET_ADMIN_PASSWORD", "admin123")
    if constant_time_compare(password or "", expected):
        kv.set_item(AUTH_KEY, "true")
        logger.info("Admin session opened")
        return True
    logger.warning("Admin login rejected")
    return False


def logout(kv: KeyValueStore) -> None:
    kv.remove_item(AUTH_KEY)


def is_authenticated(kv: KeyValueStore) -> bool:
    return kv.get_item(AUTH_KEY) == "true"
