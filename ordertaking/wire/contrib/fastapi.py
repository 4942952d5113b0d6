"""
FastAPI integration for ordertaking.wire.

    from ordertaking.wire.contrib import fastapi
    # fapp = fastapi.from_application(app)
    # or, with the stand-alone collaborators:
    # fapp = fastapi.create_app(settings)
"""

from ._fastapi import (
    add_endpoint_to_app,
    from_application,
    compile_to_fastapi_route,
    create_app,
)

__all__ = (
    "add_endpoint_to_app",
    "from_application",
    "compile_to_fastapi_route",
    "create_app",
)
