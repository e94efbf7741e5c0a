"""
Pydantic schema definitions for API payloads.

Each entity (events, speakers, sponsors, attendees, agenda items)
defines its own models for request and response bodies.  Schemas are
separate from the stored documents so the API representation stays
explicit even though the store itself is schemaless.
"""
