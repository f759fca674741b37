"""ASGI entrypoint for the spin wheel API."""

from spin_wheel.api.app import create_app
from spin_wheel.containers import build_container

app = create_app(build_container())
