"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging, error rendering). Feature-specific SQL lives in the
feature packages (`employees/`, `departments/`, `bootstrap/`).
"""
