"""Shared test fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from spin_wheel.adapters.memory_store import InMemoryWheelStore
from spin_wheel.api.app import create_app
from spin_wheel.config import Settings
from spin_wheel.containers import AppContainer, build_container
from spin_wheel.domain.models import Segment


def make_segments(*labels: str) -> list[Segment]:
    return [
        Segment(id=index + 1, label=label, color="red", order=index)
        for index, label in enumerate(labels)
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", seed_defaults=False)


@pytest.fixture
def store() -> InMemoryWheelStore:
    return InMemoryWheelStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
