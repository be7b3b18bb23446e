"""Session store port - client-side key/value storage for the session record."""

from typing import Protocol


class SessionStore(Protocol):
    """String key/value storage, shaped like browser local storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...
