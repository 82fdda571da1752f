"""
Login endpoint for API v1.

Checks a username/password pair and returns the public user record.
No token or session is issued; clients keep the returned user
themselves.
"""

from fastapi import APIRouter, Depends, HTTPException

from campus_events_api.app.api.deps import get_user_service
from campus_events_api.app.core.errors import CampusEventsError
from campus_events_api.app.schemas.user import LoginRequest, UserRead
from campus_events_api.app.services import UserService


router = APIRouter()


@router.post("/login", response_model=UserRead)
async def login_user(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    try:
        user = service.authenticate(credentials.username, credentials.password)
    except CampusEventsError as e:
        raise HTTPException(status_code=e.http_status, detail=str(e)) from e
    return UserRead.from_record(user)
