"""Weather alert model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from skycast.models.enums import Severity


class Alert(BaseModel):
    """A rule-derived weather alert. ``id`` is stable per rule."""

    model_config = ConfigDict(frozen=True)

    id: str
    severity: Severity
    title: str
    description: str
    issued_at: str
