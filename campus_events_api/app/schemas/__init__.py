"""
Pydantic schema definitions for API payloads.

Each domain (users, events, registrations) defines its own Pydantic
models for request and response bodies.  Schemas are separated from
the stored records in ``core.storage`` to decouple the wire format
(camelCase field names) from the internal representation.
"""
