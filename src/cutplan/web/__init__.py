"""REST API for cutplan.

Run with:
    uvicorn cutplan.web:app --reload

or:
    cutplan serve --reload
"""

from cutplan.web.app import app, create_app

__all__ = ["app", "create_app"]
