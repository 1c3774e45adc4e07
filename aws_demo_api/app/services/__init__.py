"""
Service layer.

``user_repository`` owns all access to the ``users`` table and
``data_initializer`` seeds an empty store at startup.  Endpoints
receive the repository through FastAPI dependencies rather than
importing a module‑level instance.
"""
