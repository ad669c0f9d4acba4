"""External view of stored webhook configurations.

Each webhook targets one service. The set of fields a client may see depends
on that service:

- ``slack``      – Slack incoming webhook
- ``incidentio`` – incident.io alert event HTTP source
- ``generic``    – arbitrary HTTP endpoint; the only variant that exposes
  ``headers`` and ``body``

The per-service models below are the whitelist. Anything a model does not
declare is dropped, however it ended up in storage.
"""

import enum
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class WebhookService(str, enum.Enum):
    """Services a webhook can target."""

    SLACK = "slack"
    INCIDENT_IO = "incidentio"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# External schema
# ---------------------------------------------------------------------------


class _ExternalWebhookBase(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    url: str | None = None
    description: str | None = None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class SlackWebhook(_ExternalWebhookBase):
    """Slack incoming webhook."""

    service: Literal["slack"]


class IncidentIOWebhook(_ExternalWebhookBase):
    """incident.io alert event HTTP source."""

    service: Literal["incidentio"]


class GenericWebhook(_ExternalWebhookBase):
    """Arbitrary HTTP target with optional custom headers and body template."""

    service: Literal["generic"]
    headers: dict[str, str] | None = None
    body: str | None = None


ExternalWebhook = Annotated[
    Union[SlackWebhook, IncidentIOWebhook, GenericWebhook],
    Field(discriminator="service"),
]

external_webhook_adapter: TypeAdapter = TypeAdapter(ExternalWebhook)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def _as_utc(value: Any) -> Any:
    # SQLite hands back naive datetimes for timezone-aware columns
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_plain(webhook: Any) -> dict[str, Any]:
    """Flatten a stored webhook into a plain mapping.

    Identifiers become strings and ``None`` columns are left out, so a field
    that was never set stays absent instead of turning into ``null``.
    """
    raw = {
        "id": webhook.id,
        "team": webhook.team_id,
        "name": webhook.name,
        "service": webhook.service,
        "url": webhook.url,
        "description": webhook.description,
        "headers": webhook.headers,
        "body": webhook.body,
        "createdAt": _as_utc(webhook.created_at),
        "updatedAt": _as_utc(webhook.updated_at),
    }
    plain = {key: value for key, value in raw.items() if value is not None}

    for key in ("id", "team"):
        if key in plain:
            plain[key] = str(plain[key])
    if isinstance(plain.get("service"), WebhookService):
        plain["service"] = plain["service"].value
    if isinstance(plain.get("headers"), Mapping):
        plain["headers"] = dict(plain["headers"])

    return plain


def _is_unknown_service(error: ValidationError) -> bool:
    return any(e["type"] == "union_tag_invalid" for e in error.errors())


def format_external_webhook(webhook: Any) -> dict[str, Any] | None:
    """Project a stored webhook onto the external schema for its service.

    Args:
        webhook: A :class:`~app.models.Webhook` row (or anything exposing the
            same attributes).

    Returns:
        A JSON-ready dict containing only the fields its service variant
        declares, or ``None`` when the record does not fit any variant.
    """
    plain = _to_plain(webhook)
    try:
        view = external_webhook_adapter.validate_python(plain)
    except ValidationError as exc:
        if _is_unknown_service(exc):
            logger.error(
                "Schema drift: webhook %s (team %s) has unrecognised service %r: %s",
                plain.get("id"),
                plain.get("team"),
                plain.get("service"),
                exc,
            )
        else:
            logger.error(
                "Malformed webhook %s (team %s) failed external schema validation: %s",
                plain.get("id"),
                plain.get("team"),
                exc,
            )
        return None

    return view.model_dump(mode="json", by_alias=True, exclude_unset=True)


def format_external_webhooks(webhooks: Iterable[Any]) -> list[dict[str, Any]]:
    """Format every webhook, dropping the ones that fail validation.

    Retrieval order is preserved.
    """
    formatted = (format_external_webhook(webhook) for webhook in webhooks)
    return [view for view in formatted if view is not None]
