"""
Application package initializer.

The service keeps four record collections (volunteers, events,
registrations and feedback) and exposes create, list and get
operations over them.  ``core`` holds configuration, logging, database
helpers and errors; ``stores`` the persistence layer; ``schemas`` the
pydantic payloads; ``services`` the validation and creation rules; and
``api`` the HTTP routes.
"""

from .main import app  # noqa: F401
