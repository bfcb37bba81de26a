"""ASGI entrypoint for the Homebite API."""

from homebite.api.app import create_app
from homebite.containers import build_container

app = create_app(build_container())
