"""Request models for API endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import get_settings
from .config import SearchOptions


class SearchRequest(BaseModel):
    """Request model for searching a posted record collection."""

    query: str = Field(default="", description="Search query; empty lists all items")
    items: List[Dict[str, Any]] = Field(default_factory=list, description="Records to rank")
    options: Optional[SearchOptions] = Field(None, description="Per-call config overrides")

    @field_validator("items")
    @classmethod
    def validate_items(cls, v: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Reject oversized collections."""
        limit = get_settings().max_items_per_request
        if len(v) > limit:
            raise ValueError(f"At most {limit} items may be searched per request")
        return v
