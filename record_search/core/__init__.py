"""Core search engine functionality."""

from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher, MatchType, levenshtein_distance, similarity
from .normalizer import TextNormalizer
from .highlighter import Highlighter
from .cache import ResultCache, SearchHistory
from .fields import discover_fields, get_nested_value

__all__ = [
    "SearchEngine",
    "FuzzyMatcher",
    "MatchType",
    "levenshtein_distance",
    "similarity",
    "TextNormalizer",
    "Highlighter",
    "ResultCache",
    "SearchHistory",
    "discover_fields",
    "get_nested_value",
]
