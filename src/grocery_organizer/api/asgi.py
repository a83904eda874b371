"""ASGI entrypoint for the grocery organizer API."""

from grocery_organizer.api.app import create_app
from grocery_organizer.containers import build_container

app = create_app(build_container())
