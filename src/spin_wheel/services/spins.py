"""Server-side spin flow."""

import random
from dataclasses import dataclass

from spin_wheel.domain.errors import NotEnoughSegmentsError
from spin_wheel.domain.models import Segment, SpinResult
from spin_wheel.domain.wheel import calculate_winning_segment, generate_spin_rotation
from spin_wheel.services.segments import SegmentRepository
from spin_wheel.services.sessions import SessionRepository


@dataclass
class SpinService:
    """Pick a rotation, resolve the winner and count the spin."""

    segment_repository: SegmentRepository
    session_repository: SessionRepository
    min_segments: int = 2
    rng: random.Random | None = None

    def spin(self, current_rotation: float = 0.0) -> SpinResult:
        """Spin on from ``current_rotation`` and return the outcome."""
        segments = self.segment_repository.list_segments()
        if len(segments) < self.min_segments:
            raise NotEnoughSegmentsError(len(segments), self.min_segments)
        rotation = current_rotation + generate_spin_rotation(self.rng)
        winner = calculate_winning_segment(rotation, segments)
        session = self.session_repository.increment_spin_count()
        return SpinResult(rotation=rotation, segment=winner, session=session)

    def resolve(self, rotation: float) -> Segment:
        """Return the winner for a rotation without counting a spin."""
        return calculate_winning_segment(
            rotation, self.segment_repository.list_segments()
        )
