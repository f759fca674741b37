"""In-memory store for wheel segments and the wheel session."""

import threading
from collections.abc import Iterable
from dataclasses import fields as dataclass_fields
from dataclasses import replace

from spin_wheel.domain.errors import InvalidSessionUpdateError, SegmentLimitError
from spin_wheel.domain.models import SESSION_ID, Segment, WheelSession
from spin_wheel.services.segments import SegmentRepository
from spin_wheel.services.sessions import SessionRepository

_FIRST_SEGMENT_ID = 1
_SESSION_FIELDS = frozenset(
    field.name for field in dataclass_fields(WheelSession) if field.name != "id"
)

DEFAULT_SEGMENTS = (
    ("Apple", "from-red-500 to-red-600"),
    ("Orange", "from-orange-500 to-orange-600"),
    ("Banana", "from-yellow-500 to-yellow-600"),
    ("Grape", "from-purple-500 to-purple-600"),
    ("Cherry", "from-pink-500 to-pink-600"),
    ("Mango", "from-amber-500 to-amber-600"),
)


class InMemoryWheelStore(SegmentRepository, SessionRepository):
    """Process-lifetime store holding segments and the singleton session.

    One lock guards both collections and the id counter so every method is
    atomic even when handlers run on worker threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._segments: dict[int, Segment] = {}
        self._next_id = _FIRST_SEGMENT_ID
        self._session: WheelSession | None = None

    @classmethod
    def with_defaults(
        cls, labels: Iterable[str] | None = None
    ) -> "InMemoryWheelStore":
        """Build a store seeded with default segments and a fresh session."""
        store = cls()
        if labels is None:
            seeds = list(DEFAULT_SEGMENTS)
        else:
            colors = [color for _, color in DEFAULT_SEGMENTS]
            seeds = [
                (label, colors[index % len(colors)])
                for index, label in enumerate(labels)
            ]
        for order, (label, color) in enumerate(seeds):
            store.create_segment(label=label, color=color, order=order)
        store.upsert_session({})
        return store

    def list_segments(self) -> list[Segment]:
        """Return segments sorted by order, then id."""
        with self._lock:
            return sorted(
                self._segments.values(), key=lambda segment: (segment.order, segment.id)
            )

    def create_segment(
        self,
        label: str,
        color: str,
        order: int | None,
        max_count: int | None = None,
    ) -> Segment:
        """Assign the next id and store the segment.

        With ``max_count`` the count check and the insert happen under the
        same lock hold.
        """
        with self._lock:
            if max_count is not None and len(self._segments) >= max_count:
                raise SegmentLimitError(
                    f"You can have a maximum of {max_count} segments."
                )
            segment = Segment(
                id=self._next_id,
                label=label,
                color=color,
                order=len(self._segments) if order is None else order,
            )
            self._segments[segment.id] = segment
            self._next_id += 1
            return segment

    def delete_segment(self, segment_id: int, min_count: int | None = None) -> None:
        """Drop a segment if present, refusing to go below ``min_count``."""
        with self._lock:
            if (
                min_count is not None
                and segment_id in self._segments
                and len(self._segments) <= min_count
            ):
                raise SegmentLimitError(
                    f"You need at least {min_count} segments to spin the wheel."
                )
            self._segments.pop(segment_id, None)

    def delete_all_segments(self) -> None:
        """Clear segments and restart ids from the first value."""
        with self._lock:
            self._segments.clear()
            self._next_id = _FIRST_SEGMENT_ID

    def get_session(self) -> WheelSession | None:
        """Return the session, or None before it is created."""
        with self._lock:
            return self._session

    def upsert_session(self, fields: dict[str, object]) -> WheelSession:
        """Shallow-merge fields into the session, creating it if needed.

        A ``total_spins`` below the stored count is rejected; the comparison
        and the write share one lock hold.
        """
        unknown = set(fields) - _SESSION_FIELDS
        if unknown:
            raise InvalidSessionUpdateError(
                f"Unknown session fields: {', '.join(sorted(unknown))}"
            )
        with self._lock:
            base = self._session or WheelSession(id=SESSION_ID)
            total_spins = fields.get("total_spins")
            if total_spins is not None and total_spins < base.total_spins:
                raise InvalidSessionUpdateError(
                    "total_spins cannot decrease "
                    f"(current {base.total_spins}, got {total_spins})"
                )
            self._session = replace(base, **fields)
            return self._session

    def increment_spin_count(self) -> WheelSession:
        """Add one spin, creating the session with a single spin if absent."""
        with self._lock:
            if self._session is None:
                self._session = WheelSession(id=SESSION_ID, total_spins=1)
            else:
                self._session = replace(
                    self._session, total_spins=self._session.total_spins + 1
                )
            return self._session
