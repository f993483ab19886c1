"""To-do list and counter served as htmx fragments."""

from wren.demo.app import create_app

__all__ = ["create_app"]
