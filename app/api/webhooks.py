"""External API endpoints for webhook configurations.

Webhooks are owned by a team and only ever listed for that team. Each one
is returned through the external schema of its service, so fields that a
service does not expose (``headers`` and ``body`` outside ``generic``) never
leave the API.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth import CurrentTeamId
from app.database import get_db
from app.models import Webhook
from app.utils.webhook import format_external_webhooks

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v2/webhooks", tags=["webhooks"])

DbSession = Annotated[Session, Depends(get_db)]


@router.get("", summary="List webhooks")
def list_webhooks(db: DbSession, team_id: CurrentTeamId) -> dict[str, Any]:
    """Return every webhook of the authenticated team.

    Records that do not validate against their service schema are logged and
    left out; they never fail the whole listing.
    """
    webhooks = db.query(Webhook).filter(Webhook.team_id == team_id).all()
    data = format_external_webhooks(webhooks)

    logger.debug("Listed %d of %d webhooks for team %s", len(data), len(webhooks), team_id)
    return {"data": data}
