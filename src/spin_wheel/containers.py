"""Dependency container wiring for the application."""

from dataclasses import dataclass

from spin_wheel.adapters.memory_store import InMemoryWheelStore
from spin_wheel.config import Settings, parse_segment_labels
from spin_wheel.services.segments import SegmentService
from spin_wheel.services.sessions import SessionService
from spin_wheel.services.spins import SpinService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: InMemoryWheelStore
    segment_service: SegmentService
    session_service: SessionService
    spin_service: SpinService


def build_store(settings: Settings) -> InMemoryWheelStore:
    """Create the in-memory store, seeded when configured."""
    if not settings.seed_defaults:
        return InMemoryWheelStore()
    return InMemoryWheelStore.with_defaults(
        parse_segment_labels(settings.default_segment_labels)
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    segment_service = SegmentService(
        repository=store,
        min_segments=resolved_settings.min_segments,
        max_segments=resolved_settings.max_segments,
        enforce_limits=resolved_settings.enforce_segment_limits,
    )
    session_service = SessionService(store)
    spin_service = SpinService(
        segment_repository=store,
        session_repository=store,
        min_segments=resolved_settings.min_segments,
    )
    return AppContainer(
        settings=resolved_settings,
        store=store,
        segment_service=segment_service,
        session_service=session_service,
        spin_service=spin_service,
    )
