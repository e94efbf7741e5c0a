"""
Service layer.

Each service wraps one collection of the document store and holds the
business rules for its entity: validation, referential checks against
other collections and the shape of the stored documents.  Services
receive the store in their constructor and never reach for globals.
"""
