"""Shared utilities — logging and cross-cutting helpers.

Rules
-----
* No business logic.
* No I/O beyond attaching log handlers.
* Importable by any layer.
"""
