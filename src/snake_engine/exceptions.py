"""Exceptions raised at the engine boundary."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a value outside the engine's domain."""


class UnknownSessionError(KeyError):
    """Raised when a spectator session id is not registered."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session {session_id!r} not found.")
