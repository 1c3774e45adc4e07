"""
HTTP API package.

``router`` aggregates the endpoint modules under ``endpoints``;
``dependencies`` provides the objects those endpoints need.
"""
