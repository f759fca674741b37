"""Wheel geometry: spin rotations, winner resolution and layout angles.

Angles are in degrees. The pointer is fixed at the top of the wheel (0 degrees)
and the wheel turns clockwise, so the segment under the pointer after a
rotation ``r`` sits at ``360 - r`` in the wheel's own frame. Segment ``i``
spans ``[i * arc, (i + 1) * arc)`` where ``arc = 360 / len(segments)``.
"""

import math
import random
from collections.abc import Sequence

from spin_wheel.domain.errors import EmptyWheelError
from spin_wheel.domain.models import Segment

FULL_TURN = 360.0
MIN_ROTATIONS = 5
MAX_ROTATIONS = 8

COLOR_GRADIENTS = (
    "from-red-500 to-red-600",
    "from-blue-500 to-blue-600",
    "from-green-500 to-green-600",
    "from-yellow-500 to-yellow-600",
    "from-purple-500 to-purple-600",
    "from-pink-500 to-pink-600",
    "from-indigo-500 to-indigo-600",
    "from-orange-500 to-orange-600",
    "from-teal-500 to-teal-600",
    "from-amber-500 to-amber-600",
    "from-cyan-500 to-cyan-600",
    "from-lime-500 to-lime-600",
)


def generate_spin_rotation(
    rng: random.Random | None = None,
    min_rotations: int = MIN_ROTATIONS,
    max_rotations: int = MAX_ROTATIONS,
) -> float:
    """Return a few full turns plus a random offset below one turn."""
    source = rng or random
    full_rotations = min_rotations + source.random() * (max_rotations - min_rotations)
    offset = source.random() * FULL_TURN
    return full_rotations * FULL_TURN + offset


def normalize_rotation(rotation: float) -> float:
    """Fold any rotation into ``[0, 360)``."""
    return ((rotation % FULL_TURN) + FULL_TURN) % FULL_TURN


def calculate_winning_segment(
    final_rotation: float, segments: Sequence[Segment]
) -> Segment:
    """Return the segment under the pointer after ``final_rotation``."""
    if not segments:
        raise EmptyWheelError
    arc = FULL_TURN / len(segments)
    pointer_angle = (FULL_TURN - normalize_rotation(final_rotation)) % FULL_TURN
    # The modulo keeps float rounding at exactly 360 inside the list.
    index = math.floor(pointer_angle / arc) % len(segments)
    return segments[index]


def generate_segment_angles(count: int) -> list[float]:
    """Return the start angle of each segment in index order."""
    if count <= 0:
        return []
    arc = FULL_TURN / count
    return [index * arc for index in range(count)]


def random_color(rng: random.Random | None = None) -> str:
    """Pick a color gradient token for a new segment."""
    return (rng or random).choice(COLOR_GRADIENTS)
