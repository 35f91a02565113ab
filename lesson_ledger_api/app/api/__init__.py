"""
API package.

``router`` aggregates the domain routers under ``/api``; ``dependencies``
wires the store client into the services they use.
"""
