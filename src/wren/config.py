"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    workers: int = 1

    # Reload (development mode — requires debug=True)
    reload_dirs: tuple[str, ...] = ()

    # Pages
    title: str = "ToDos App"
    htmx_src: str = "https://unpkg.com/htmx.org@1.9.5"

    # Limits
    max_content_length: int = 1024 * 1024  # 1 MB

    # Logging (handed to the pounce server, wren never installs handlers)
    lifecycle_logging: bool = True
    log_format: str = "text"
    log_level: str = "info"
