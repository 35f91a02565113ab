"""
Service layer.

Each service wraps the SQL for one domain.  Services are plain classes
constructed with the ``Database`` store client; the API layer builds
them per request through dependencies in ``api.dependencies``.
"""
