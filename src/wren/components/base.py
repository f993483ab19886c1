"""Typed, composable HTML components.

A component is a frozen dataclass: its fields are its parameters, its
``template`` class attribute is a kida template over those fields, and
``render()`` turns the two into an HTML string. Rendering is a pure
function of the fields; components never read application state.

Children are parameters too. A field holding another ``Component`` is
rendered first and handed to the parent's template as markup, so it is
spliced in verbatim rather than escaped. Everything else goes through
kida's autoescaping.

Usage::

    @dataclass(frozen=True, slots=True)
    class Card(Component):
        template = '<section class="card"><h2>{{ title }}</h2>{{ body }}</section>'

        title: str
        body: Component

    Card("Hi", Raw("<p>there</p>")).render()
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, fields
from functools import lru_cache
from typing import Any, ClassVar

from kida import Environment
from kida.utils.html import Markup

from wren.errors import WrenError

# One environment for every component; templates never touch a loader.
_env = Environment(autoescape=True)


class RenderError(WrenError):
    """A component failed to render.

    Not expected in normal operation. The request that hit it gets a
    500; the process keeps serving.
    """

    def __init__(self, component: str, cause: BaseException) -> None:
        self.component = component
        super().__init__(f"{component} failed to render: {cause}")


@lru_cache(maxsize=None)
def _compile(source: str) -> Any:
    return _env.from_string(source)


@dataclass(frozen=True, slots=True)
class Component:
    """Base class for renderable units.

    Subclasses declare fields and a ``template``. Override ``render()``
    directly for components that are plain concatenation.
    """

    template: ClassVar[str] = ""

    def context(self) -> dict[str, Any]:
        """Template context: every field, with child components pre-rendered."""
        ctx: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Component):
                value = Markup(value.render())
            ctx[f.name] = value
        return ctx

    def render(self) -> str:
        name = type(self).__name__
        ctx = self.context()
        try:
            return _compile(self.template).render(ctx)
        except Exception as exc:
            raise RenderError(name, exc) from exc

    def __html__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Raw(Component):
    """Trusted markup, passed through untouched."""

    html: str

    def render(self) -> str:
        return self.html


@dataclass(frozen=True, slots=True)
class Text(Component):
    """Plain text, escaped."""

    template = "{{ text }}"

    text: str


@dataclass(frozen=True, slots=True)
class Group(Component):
    """Several children rendered back to back, in order."""

    children: tuple[Component, ...] = ()

    def render(self) -> str:
        return "".join(child.render() for child in self.children)


@dataclass(frozen=True, slots=True)
class Repeat(Component):
    """Render ``each(item)`` for every item and concatenate the results.

    Any iterable is accepted and frozen into a tuple, so a generator
    renders the same on every call. An empty sequence renders as the
    empty string.
    """

    items: Sequence[Any]
    each: Callable[[Any], Component]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def render(self) -> str:
        return "".join(self.each(item).render() for item in self.items)


def render(component: Component) -> str:
    """Render *component* to an HTML string."""
    return component.render()
