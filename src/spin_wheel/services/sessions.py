"""Wheel session service."""

from dataclasses import dataclass
from typing import Protocol

from spin_wheel.domain.models import WheelSession


class SessionRepository(Protocol):
    """Persistence interface for the singleton wheel session."""

    def get_session(self) -> WheelSession | None:
        """Return the session if one has been created."""

    def upsert_session(self, fields: dict[str, object]) -> WheelSession:
        """Merge fields into the session, creating it from defaults if absent.

        Implementations reject a ``total_spins`` lower than the stored one.
        """

    def increment_spin_count(self) -> WheelSession:
        """Add one spin to the session, creating it if absent."""


@dataclass
class SessionService:
    """Service for reading and updating the wheel session."""

    repository: SessionRepository

    def get_session(self) -> WheelSession | None:
        """Return the current session, if any."""
        return self.repository.get_session()

    def update_session(self, fields: dict[str, object]) -> WheelSession:
        """Apply a partial update; the spin count may not go backwards."""
        return self.repository.upsert_session(fields)

    def record_spin(self) -> WheelSession:
        """Count one completed spin."""
        return self.repository.increment_spin_count()
