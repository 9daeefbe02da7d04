"""ASGI entrypoint for the metabolikal API."""

from metabolikal.api.app import create_app
from metabolikal.containers import build_container

app = create_app(build_container())
