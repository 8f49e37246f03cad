"""Activity log and dashboard schemas."""

from datetime import datetime
from typing import Any, Optional
from pydantic import Field

from api.schemas.common import CamelModel, FilterModel


class ActivityLogResponse(CamelModel):
    id: int
    user_id: Optional[int] = None
    action: str
    entity_type: str
    entity_id: Optional[int] = None
    description: str
    metadata: Optional[dict[str, Any]] = Field(None, validation_alias="extra_metadata")
    created_at: datetime


class ActivityLogFilters(FilterModel):
    user_id: Optional[int] = None
    limit: int = Field(50, ge=1, le=500)


class DashboardStats(CamelModel):
    open_positions: int
    active_candidates: int
    interviews_today: int
    new_hires: int
