"""ASGI entrypoint for the studio site API."""

from studio_site.api.app import create_app
from studio_site.containers import build_container

app = create_app(build_container())
