from __future__ import annotations

from fastapi import Request

from core.points import PointsService


# One PointsService (and its store) per app, built in create_app().
def get_points_service(request: Request) -> PointsService:
    return request.app.state.points_service
