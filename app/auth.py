"""Bearer access-key authentication for the external API."""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import User

logger = logging.getLogger(__name__)

UNAUTHORIZED_DETAIL = "Unauthorized access. API key is missing or invalid."

# auto_error=False so a missing header is reported as 401 rather than 403
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Resolve the ``Authorization: Bearer <access key>`` header to a user.

    Raises:
        HTTPException 401: If the header is missing or the key matches no user.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized()

    user = db.query(User).filter(User.access_key == credentials.credentials).first()
    if user is None:
        logger.info("Rejected request with unknown access key")
        raise _unauthorized()
    return user


def get_current_team_id(user: Annotated[User, Depends(get_current_user)]) -> int:
    """Return the team of the authenticated user.

    Raises:
        HTTPException 403: If the user does not belong to a team.
    """
    if user.team_id is None:
        logger.warning("User %s has no team; refusing team-scoped request", user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user.team_id


CurrentTeamId = Annotated[int, Depends(get_current_team_id)]
