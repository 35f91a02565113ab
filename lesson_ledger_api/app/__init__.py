"""
Application package for the Lesson Ledger API.

``main.create_app`` assembles the FastAPI application from the
``core``, ``api``, ``schemas`` and ``services`` subpackages.
"""
