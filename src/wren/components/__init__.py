"""Composable HTML components rendered through kida."""

from wren.components.base import Component, Group, Raw, RenderError, Repeat, Text, render

__all__ = ["Component", "Group", "Raw", "RenderError", "Repeat", "Text", "render"]
