"""Preconfigured engines for the record kinds the application searches."""

from typing import Dict, Optional

from .config import get_settings
from .core.engine import SearchEngine
from .models.config import SearchConfig

TENDER_CONFIG = SearchConfig(
    search_fields=[
        "lotPassport.itemName",
        "lotPassport.customerName",
        "lotPassport.deadline",
        "platform",
        "analysisDate",
    ],
    fuzzy_threshold=0.7,
    max_results=50,
    exact_match_boost=2.5,
    partial_match_boost=1.8,
)

CONTRACT_CONFIG = SearchConfig(
    search_fields=[
        "contractTitle",
        "fileName",
        "overallRecommendation",
        "analysisDate",
    ],
    fuzzy_threshold=0.6,
    max_results=30,
    exact_match_boost=2.0,
    partial_match_boost=1.5,
)

COMPETITOR_CONFIG = SearchConfig(
    search_fields=[
        "companyName",
        "experience",
        "specialization",
    ],
    fuzzy_threshold=0.8,
    max_results=20,
    exact_match_boost=3.0,
    partial_match_boost=2.0,
)

PRESET_CONFIGS: Dict[str, SearchConfig] = {
    "tenders": TENDER_CONFIG,
    "contracts": CONTRACT_CONFIG,
    "competitors": COMPETITOR_CONFIG,
}


def create_engine(config: Optional[SearchConfig] = None) -> SearchEngine:
    """Build an engine sized from the application settings."""
    settings = get_settings()
    return SearchEngine(
        config=config,
        cache_size=settings.cache_max_size,
        history_size=settings.history_max_size,
        debounce_ms=settings.debounce_ms,
    )


tender_search_engine = create_engine(TENDER_CONFIG)
contract_search_engine = create_engine(CONTRACT_CONFIG)
competitor_search_engine = create_engine(COMPETITOR_CONFIG)

search_engines: Dict[str, SearchEngine] = {
    "tenders": tender_search_engine,
    "contracts": contract_search_engine,
    "competitors": competitor_search_engine,
}


def get_engine(preset: str) -> Optional[SearchEngine]:
    """Look up a preset engine by name."""
    return search_engines.get(preset)
