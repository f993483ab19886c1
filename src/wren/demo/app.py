"""The to-do and counter application.

Each app owns one ``RecordStore`` and one ``Counter`` for its lifetime;
handlers close over them, and components only ever see the snapshots
handlers pass in. Mutating routes make exactly one store call and then
render at most once.

Run:
    python -m wren.demo
"""

from wren.app import App
from wren.config import AppConfig
from wren.counter import Counter
from wren.demo.components import CounterPage, CounterView, MainPage, TodoItem, TodoList
from wren.http.response import Response
from wren.store import DuplicateRecord, Record, RecordNotFound, RecordStore


def create_app(
    config: AppConfig | None = None,
    *,
    store: RecordStore | None = None,
    counter: Counter | None = None,
) -> App:
    """Build an App wired to *store* and *counter* (fresh ones by default)."""
    app = App(config)
    todos = store if store is not None else RecordStore()
    count = counter if counter is not None else Counter()
    title = app.config.title
    htmx_src = app.config.htmx_src

    @app.route("/", name="index")
    def index():
        return MainPage(title, htmx_src, tuple(todos.list()))

    @app.route("/todos", name="todo_list")
    def todo_list():
        return TodoList.of(todos.list())

    @app.route("/todos", methods=["POST"], name="create_todo")
    def create_todo(body: Record):
        try:
            todos.create(body)
        except DuplicateRecord:
            return Response(""), 400
        return TodoItem(body), 201

    @app.route("/todos/{todo_id:int}", methods=["PUT"], name="update_todo")
    def update_todo(todo_id: int, body: Record):
        try:
            todos.update(todo_id, body)
        except RecordNotFound:
            return Response(""), 404
        except DuplicateRecord:
            return Response(""), 400
        return Response(""), 204

    @app.route("/todos/{todo_id:int}", methods=["DELETE"], name="delete_todo")
    def delete_todo(todo_id: int):
        try:
            todos.delete(todo_id)
        except RecordNotFound:
            return Response(""), 404
        return Response("")

    @app.route("/counter", name="counter")
    def counter_page():
        return CounterPage(title, htmx_src, count.value)

    @app.route("/counter/-", name="decrement")
    def decrement():
        return CounterView(count.decrement())

    @app.route("/counter/+", name="increment")
    def increment():
        return CounterView(count.increment())

    @app.route("/hello/{name}", name="hello")
    def hello(name: str):
        return Response(f"Hello, {name}!", content_type="text/plain; charset=utf-8")

    return app


def main() -> None:
    """Serve the demo with the default configuration."""
    create_app().run()
