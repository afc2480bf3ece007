"""Engine configuration models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_IMPORTANT_FIELDS = ["itemName", "title", "name", "customerName"]
DEFAULT_SUGGESTION_FIELDS = ["itemName", "title", "name", "customerName", "platform"]


class SearchConfig(BaseModel):
    """Scoring configuration, fixed for the lifetime of an engine."""
    
    model_config = ConfigDict(frozen=True)
    
    search_fields: List[str] = Field(
        default_factory=list,
        description="Dotted field paths to inspect; empty means auto-discover"
    )
    fuzzy_threshold: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Minimum similarity for a fuzzy match"
    )
    max_results: int = Field(default=50, ge=0, description="Cap on returned results")
    case_sensitive: bool = Field(default=False, description="Whether matching is case sensitive")
    exact_match_boost: float = Field(default=2.0, gt=0.0, description="Exact match multiplier")
    partial_match_boost: float = Field(
        default=1.5, gt=0.0, description="Prefix and substring match multiplier"
    )
    important_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IMPORTANT_FIELDS),
        description="Field name fragments whose contribution is boosted"
    )
    important_field_boost: float = Field(default=1.5, gt=0.0)
    suggestion_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SUGGESTION_FIELDS),
        description="Field paths scanned for value suggestions"
    )

    @field_validator("search_fields", "important_fields", "suggestion_fields")
    @classmethod
    def validate_paths(cls, v: List[str]) -> List[str]:
        """Strip paths and drop empty entries."""
        return [path.strip() for path in v if path and path.strip()]


class SearchOptions(BaseModel):
    """Per-call overrides of a SearchConfig plus the debounce window."""
    
    search_fields: Optional[List[str]] = None
    fuzzy_threshold: Optional[float] = Field(None, ge=0.0, le=1.0)
    max_results: Optional[int] = Field(None, ge=0)
    case_sensitive: Optional[bool] = None
    exact_match_boost: Optional[float] = Field(None, gt=0.0)
    partial_match_boost: Optional[float] = Field(None, gt=0.0)
    important_fields: Optional[List[str]] = None
    important_field_boost: Optional[float] = Field(None, gt=0.0)
    suggestion_fields: Optional[List[str]] = None
    debounce_ms: Optional[int] = Field(None, ge=0, description="Debounce window in milliseconds")

    def overrides(self) -> Dict[str, Any]:
        """Config fields explicitly set on this call."""
        return self.model_dump(exclude_none=True, exclude={"debounce_ms"})
