"""One-way navigation contract between the wizard and the app shell."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Navigator(Protocol):
    """Replaces the current location. There is no history to go back to."""

    def replace(self, path: str) -> None:
        """Navigate to path."""


class RecordingNavigator:
    """Keeps every redirect in order. The CLI reads `current` to report where
    the user lands."""

    def __init__(self) -> None:
        self.history: list[str] = []

    def replace(self, path: str) -> None:
        self.history.append(path)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None
