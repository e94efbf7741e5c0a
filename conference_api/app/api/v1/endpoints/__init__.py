"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one entity (events, speakers,
sponsors, attendees, agenda items).  The routers are aggregated in
``router.py`` and included in the application by ``create_app``.
"""
