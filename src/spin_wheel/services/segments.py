"""Segment management with the wheel's edge policy."""

import random
from dataclasses import dataclass
from typing import Protocol

from spin_wheel.domain.models import Segment, SegmentLayout
from spin_wheel.domain.wheel import FULL_TURN, generate_segment_angles, random_color


class SegmentRepository(Protocol):
    """Persistence interface for wheel segments."""

    def list_segments(self) -> list[Segment]:
        """Return all segments ordered by their order field."""

    def create_segment(
        self,
        label: str,
        color: str,
        order: int | None,
        max_count: int | None = None,
    ) -> Segment:
        """Store a new segment unless ``max_count`` segments already exist."""

    def delete_segment(self, segment_id: int, min_count: int | None = None) -> None:
        """Remove a segment unless only ``min_count`` remain; absent ids are ignored."""

    def delete_all_segments(self) -> None:
        """Remove every segment and reset the id counter."""


@dataclass
class SegmentService:
    """Application service for segment operations.

    The repository accepts any number of segments. Bounds are passed down
    only when ``enforce_limits`` is set.
    """

    repository: SegmentRepository
    min_segments: int = 2
    max_segments: int = 12
    enforce_limits: bool = False
    rng: random.Random | None = None

    def list_segments(self) -> list[Segment]:
        """Return the current segments in wheel order."""
        return self.repository.list_segments()

    def add_segment(
        self, label: str, color: str | None = None, order: int | None = None
    ) -> Segment:
        """Add a segment, picking a random color when none is given."""
        return self.repository.create_segment(
            label=label,
            color=color or random_color(self.rng),
            order=order,
            max_count=self.max_segments if self.enforce_limits else None,
        )

    def remove_segment(self, segment_id: int) -> None:
        """Remove a segment by id."""
        self.repository.delete_segment(
            segment_id, min_count=self.min_segments if self.enforce_limits else None
        )

    def reset(self) -> None:
        """Remove all segments."""
        self.repository.delete_all_segments()

    def layout(self) -> list[SegmentLayout]:
        """Return segments with their start angle and arc width."""
        segments = self.repository.list_segments()
        if not segments:
            return []
        arc = FULL_TURN / len(segments)
        return [
            SegmentLayout(segment=segment, start_angle=angle, arc=arc)
            for segment, angle in zip(
                segments, generate_segment_angles(len(segments)), strict=True
            )
        ]
