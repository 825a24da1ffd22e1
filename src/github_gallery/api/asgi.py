"""ASGI entrypoint for the gallery API."""

from github_gallery.api.app import create_app
from github_gallery.containers import build_container

app = create_app(build_container())
