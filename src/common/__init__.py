"""
Shared building blocks for the department and user services.
It centralizes cross-cutting concerns like settings, logging, tracing, errors, and record storage.
Keeping these helpers isolated reduces duplication and keeps service modules focused on business logic.
"""
