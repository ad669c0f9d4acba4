# app/models.py
#!/usr/bin/env python3

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Team(Base):
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    users = relationship("User", back_populates="team")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False)

    # Bearer token presented to the external API
    access_key = Column(String, unique=True, index=True, nullable=False)

    # A user without a team can authenticate but cannot list anything
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    team = relationship("Team", back_populates="users")


class Webhook(Base):
    __tablename__ = "webhooks"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), index=True, nullable=False)

    # name and service are left unconstrained; rows that drift from the
    # external schema are rejected when formatted, not when loaded.
    name = Column(String)
    service = Column(String)  # "slack", "incidentio" or "generic"

    url = Column(String)
    description = Column(String)

    # Only exposed for generic webhooks
    headers = Column(JSON)
    body = Column(Text)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
