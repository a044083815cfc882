"""Infrastructure layer — filesystem integration.

This layer wraps all reading and writing of the crawler sources file.
Every raw ``OSError`` / ``json.JSONDecodeError`` must be caught here and
re-raised as a :class:`~ip_inspect.exceptions.IpInspectError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ip_inspect.infra.sources_file import (
    JsonSourcesLoader,
    load_crawler_sources,
    write_sample_sources,
)

__all__: list[str] = [
    "JsonSourcesLoader",
    "load_crawler_sources",
    "write_sample_sources",
]
