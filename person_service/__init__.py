"""Person CRUD service: REST API, storage port, health indicator, request metrics."""

__version__ = "1.0.0"
