"""Components for the to-do and counter pages.

Every top-level to-do fragment is an ``<li>`` whose ``id`` attribute is
the record id; htmx addresses deletes and updates to that element.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from wren.components import Component, Repeat
from wren.store import Record


@dataclass(frozen=True, slots=True)
class Document(Component):
    """Full HTML page shell with htmx loaded."""

    template = """<!DOCTYPE html>
<html>
    <head>
        <title>{{ title }}</title>
        <script src="{{ htmx_src }}" crossorigin="anonymous"></script>
        <meta name="color-scheme" content="dark light" />
    </head>
    <body>
        <div id="wren-error"></div>
        <main>
            {{ children }}
        </main>
    </body>
</html>
"""

    title: str
    htmx_src: str
    children: Component


@dataclass(frozen=True, slots=True)
class TodoItem(Component):
    template = (
        '<li id="{{ todo.id }}">'
        '<input value="{{ todo.text }}" name="text"'
        ' hx-put="/todos/{{ todo.id }}"'
        " hx-vals='{\"id\": \"{{ todo.id }}\"}' />"
        '<button hx-delete="/todos/{{ todo.id }}" hx-target="closest li"'
        ' hx-swap="outerHTML">delete</button>'
        "</li>"
    )

    todo: Record


@dataclass(frozen=True, slots=True)
class TodoList(Component):
    template = "<ul>{{ items }}</ul>"

    items: Component

    @classmethod
    def of(cls, todos: Iterable[Record]) -> "TodoList":
        return cls(Repeat(tuple(todos), TodoItem))


@dataclass(frozen=True, slots=True)
class TodoApp(Component):
    """Heading, add form, and the list container.

    New ids are computed in the browser as one past the largest ``li`` id
    on the page; two clients racing for the same id get a 400 for the
    loser.
    """

    template = """<h1>{{ heading }}</h1>
<a href="/counter">counter</a>
<button hx-get="/todos" hx-target="#todos" hx-indicator="#spinner">refresh</button>
<form
    hx-post="/todos"
    hx-vars="js:{ id: Math.max(-1, ...[...document.querySelectorAll('#todos li')].map((e) => parseInt(e.id))) + 1 }"
    hx-target="#todos > ul"
    hx-swap="beforeend"
    hx-on:htmx:after-request="this.reset()"
    hx-on:htmx:response-error="alert('error: ' + event.detail.xhr.status)"
>
    <input type="text" name="text" />
    <button type="submit">add</button>
</form>
<div id="todos">{{ todos }}</div>
<img id="spinner" class="htmx-indicator" src="https://i.gifer.com/ZKZg.gif" width="40" />"""

    heading: str
    todos: Component


@dataclass(frozen=True, slots=True)
class MainPage(Component):
    title: str
    htmx_src: str
    todos: tuple[Record, ...]

    def render(self) -> str:
        app = TodoApp(self.title, TodoList.of(self.todos))
        return Document(self.title, self.htmx_src, app).render()


@dataclass(frozen=True, slots=True)
class CounterView(Component):
    template = (
        '<div id="counter">'
        '<button hx-get="/counter/-" hx-target="#counter" hx-swap="outerHTML">-</button>'
        "<output>{{ value }}</output>"
        '<button hx-get="/counter/+" hx-target="#counter" hx-swap="outerHTML">+</button>'
        "</div>"
    )

    value: int


@dataclass(frozen=True, slots=True)
class CounterPanel(Component):
    template = '<h1>Counter</h1>\n<a href="/">todos</a>\n{{ counter }}'

    counter: Component


@dataclass(frozen=True, slots=True)
class CounterPage(Component):
    title: str
    htmx_src: str
    value: int

    def render(self) -> str:
        panel = CounterPanel(CounterView(self.value))
        return Document(self.title, self.htmx_src, panel).render()
