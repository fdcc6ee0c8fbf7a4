"""ASGI entrypoint for the cafeteria voting API."""

from cafeteria_voting.api.app import create_app
from cafeteria_voting.containers import build_container

app = create_app(build_container())
