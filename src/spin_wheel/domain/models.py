"""Domain models for the spin wheel."""

from dataclasses import dataclass

SESSION_ID = 1


@dataclass(frozen=True)
class Segment:
    """One labeled wedge of the wheel."""

    id: int
    label: str
    color: str
    order: int


@dataclass(frozen=True)
class WheelSession:
    """Singleton usage record for the wheel."""

    id: int = SESSION_ID
    total_spins: int = 0
    sound_enabled: bool = True


@dataclass(frozen=True)
class SegmentLayout:
    """Angular placement of a segment for rendering."""

    segment: Segment
    start_angle: float
    arc: float


@dataclass(frozen=True)
class SpinResult:
    """Outcome of a server-side spin."""

    rotation: float
    segment: Segment
    session: WheelSession
