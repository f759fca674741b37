"""Tests for segment service."""

import random
import threading

import pytest

from spin_wheel.adapters.memory_store import InMemoryWheelStore
from spin_wheel.domain.errors import SegmentLimitError
from spin_wheel.domain.wheel import COLOR_GRADIENTS
from spin_wheel.services.segments import SegmentService


def test_add_segment_picks_random_color(store: InMemoryWheelStore) -> None:
    service = SegmentService(store, rng=random.Random(5))

    segment = service.add_segment("Pizza")

    assert segment.color in COLOR_GRADIENTS
    assert segment.order == 0


def test_add_segment_keeps_explicit_color(store: InMemoryWheelStore) -> None:
    service = SegmentService(store)
    segment = service.add_segment("Pizza", color="from-red-500 to-red-600", order=3)
    assert segment.color == "from-red-500 to-red-600"
    assert segment.order == 3


def test_limits_are_ignored_by_default(store: InMemoryWheelStore) -> None:
    service = SegmentService(store, max_segments=2)
    for index in range(3):
        service.add_segment(f"S{index}")
    service.remove_segment(1)
    service.remove_segment(2)

    assert [segment.label for segment in service.list_segments()] == ["S2"]


def test_enforced_maximum_rejects_extra_segment(store: InMemoryWheelStore) -> None:
    service = SegmentService(store, max_segments=2, enforce_limits=True)
    service.add_segment("A")
    service.add_segment("B")

    with pytest.raises(SegmentLimitError):
        service.add_segment("C")
    assert len(service.list_segments()) == 2


def test_enforced_minimum_rejects_removal(store: InMemoryWheelStore) -> None:
    service = SegmentService(store, min_segments=2, enforce_limits=True)
    first = service.add_segment("A")
    service.add_segment("B")

    with pytest.raises(SegmentLimitError):
        service.remove_segment(first.id)
    service.remove_segment(42)
    assert len(service.list_segments()) == 2


def test_reset_clears_segments(store: InMemoryWheelStore) -> None:
    service = SegmentService(store)
    service.add_segment("A")
    service.reset()
    assert service.list_segments() == []


def test_layout_assigns_equal_arcs(store: InMemoryWheelStore) -> None:
    service = SegmentService(store)
    for label in ("A", "B", "C"):
        service.add_segment(label)

    layout = service.layout()

    assert [entry.segment.label for entry in layout] == ["A", "B", "C"]
    assert [entry.start_angle for entry in layout] == [0.0, 120.0, 240.0]
    assert {entry.arc for entry in layout} == {120.0}


def test_layout_of_empty_wheel(store: InMemoryWheelStore) -> None:
    assert SegmentService(store).layout() == []


def test_enforced_maximum_holds_under_concurrent_adds(
    store: InMemoryWheelStore,
) -> None:
    service = SegmentService(store, max_segments=5, enforce_limits=True)
    rejected: list[SegmentLimitError] = []

    def add_many() -> None:
        for index in range(10):
            try:
                service.add_segment(f"S{index}")
            except SegmentLimitError as exc:
                rejected.append(exc)

    threads = [threading.Thread(target=add_many) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(service.list_segments()) == 5
    assert len(rejected) == 55
