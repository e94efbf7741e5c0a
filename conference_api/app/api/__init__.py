"""
API package containing versioned routes.

A version subpackage (``v1``) exposes a top‑level ``router`` which
includes the routers of every entity.  ``deps`` holds the FastAPI
dependencies that hand services to the endpoints.
"""
