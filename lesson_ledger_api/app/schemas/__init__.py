"""
Pydantic schema definitions for API payloads.

Each domain (members, lessons, payments, posts, users) defines its own
request and response models.  Field names are snake_case in Python and
camelCase on the wire, matching the column names of the store.
"""
