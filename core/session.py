"""Sign-in marker, persisted role and the dashboard routing built on them."""

import logging
from dataclasses import dataclass, fields
from typing import Any

from core.settings import get_setting
from core.storage import KeyValueStore

logger = logging.getLogger(__name__)

ROLE_KEY = "hexon_role"
SIGNED_IN_KEY = "hexon_signed_in"

EDUCATOR_ROLE = "educator"


@dataclass(frozen=True)
class Routes:
    """Fixed destination paths of the app shell."""

    home: str = "/"
    login: str = "/login"
    dashboard: str = "/dashboard"
    student_dashboard: str = "/dashboard/student"
    educator_dashboard: str = "/dashboard/educator"

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> "Routes":
        """Build routes from settings["routes"], keeping defaults for missing keys."""
        defaults = cls()
        return cls(
            **{
                name: str(get_setting(settings, f"routes.{name}", getattr(defaults, name)))
                for name in (f.name for f in fields(cls))
            }
        )

    def for_role(self, role: str | None) -> str:
        """Educator goes to the educator dashboard; anything else, unset included, to student."""
        if role == EDUCATOR_ROLE:
            return self.educator_dashboard
        return self.student_dashboard


def is_signed_in(store: KeyValueStore) -> bool:
    return bool(store.get(SIGNED_IN_KEY))


def mark_signed_in(store: KeyValueStore) -> None:
    store.set(SIGNED_IN_KEY, "true")


def sign_out(store: KeyValueStore) -> None:
    """Drop the sign-in marker. The persisted role is left alone."""
    store.set(SIGNED_IN_KEY, None)


def persist_role(store: KeyValueStore, role: str) -> None:
    store.set(ROLE_KEY, role)
    logger.info("Persisted role %r", role)


def dashboard_route(store: KeyValueStore, routes: Routes | None = None) -> str:
    """Where the dashboard entry point sends the user.

    Without a sign-in marker -> login. Signed in -> dashboard chosen by the
    persisted role, student when the role is missing.
    """
    routes = routes or Routes()
    if not is_signed_in(store):
        return routes.login
    return routes.for_role(store.get(ROLE_KEY))


def skip_target(store: KeyValueStore, routes: Routes | None = None) -> str:
    """Destination of the wizard's Skip link: dashboard entry if signed in, else login."""
    routes = routes or Routes()
    return routes.dashboard if is_signed_in(store) else routes.login
