"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes
all of its domain‑specific endpoints.  ``deps`` wires the services to
the store owned by the application, and ``error_handlers`` maps
request validation and unexpected failures to JSON responses.
"""
