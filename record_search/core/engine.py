"""Main search engine implementation."""

import asyncio
import json
import threading
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from ..models.config import SearchConfig, SearchOptions
from ..models.response import CacheStats, SearchResult, SearchResponse
from .cache import ResultCache, SearchHistory
from .fields import discover_fields, get_nested_value
from .fuzzy_matcher import FuzzyMatcher
from .highlighter import Highlighter
from .normalizer import TextNormalizer, stringify

logger = structlog.get_logger(__name__)

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]

MAX_SUGGESTIONS = 5
HISTORY_SUGGESTIONS = 3
SUGGESTION_SCAN_LIMIT = 20


class SearchEngine:
    """Fuzzy ranking search over an in-memory record collection."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        cache_size: int = 100,
        history_size: int = 10,
        debounce_ms: int = 300
    ) -> None:
        """
        Initialize the search engine.

        Args:
            config: Scoring configuration (defaults apply when omitted)
            cache_size: Maximum number of cached responses
            history_size: Maximum number of remembered queries
            debounce_ms: Default debounce window for search()
        """
        self.config = config or SearchConfig()
        self.debounce_ms = debounce_ms
        self.cache = ResultCache(cache_size)
        self.history = SearchHistory(history_size)

        self._lock = threading.RLock()
        self._pending: Optional[asyncio.Task] = None

        # Performance tracking
        self._stats = {
            "total_queries": 0,
            "empty_queries": 0,
            "no_matches": 0,
            "superseded": 0,
            "failed_items": 0,
            "total_execution_time": 0.0
        }

    async def search(
        self,
        query: str,
        items: Sequence[Any],
        options: OptionsLike = None,
        callback: Optional[Callable[[SearchResponse], None]] = None
    ) -> Optional[SearchResponse]:
        """
        Debounced search that records the query in the history.

        The computation starts once the debounce window has elapsed. Starting
        another debounced search before then cancels this one, in which case
        None is returned and the callback is not invoked. An exception raised
        by the callback is logged and does not affect the returned response.

        Args:
            query: Search query
            items: Records to rank
            options: Per-call config overrides and debounce window
            callback: Invoked with the response when the search completes

        Returns:
            SearchResponse, or None if superseded by a later call
        """
        opts = self._coerce_options(options)
        delay_ms = opts.debounce_ms if opts.debounce_ms is not None else self.debounce_ms

        with self._lock:
            if self._pending is not None and not self._pending.done():
                self._pending.cancel()
                self._stats["superseded"] += 1
                logger.debug("Pending search superseded", query=query)
            task = asyncio.create_task(
                self._run_debounced(query, items, opts, delay_ms / 1000.0, callback)
            )
            self._pending = task

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task.cancelled():
            return None
        return task.result()

    def instant_search(
        self,
        query: str,
        items: Sequence[Any],
        options: OptionsLike = None
    ) -> SearchResponse:
        """
        Search immediately without debouncing or touching the history.

        Args:
            query: Search query
            items: Records to rank
            options: Per-call config overrides

        Returns:
            SearchResponse with ranked results and metadata
        """
        opts = self._coerce_options(options)
        return self._perform_search(query, items, self._effective_config(opts))

    async def _run_debounced(
        self,
        query: str,
        items: Sequence[Any],
        opts: SearchOptions,
        delay: float,
        callback: Optional[Callable[[SearchResponse], None]]
    ) -> SearchResponse:
        try:
            await asyncio.sleep(delay)
            response = self._perform_search(query, items, self._effective_config(opts))
            self.history.add(query)
            if callback is not None:
                try:
                    callback(response)
                except Exception as e:
                    logger.warning("Search callback failed", query=query, error=str(e))
            return response
        finally:
            with self._lock:
                if self._pending is asyncio.current_task():
                    self._pending = None

    def _perform_search(
        self,
        query: str,
        items: Sequence[Any],
        config: SearchConfig
    ) -> SearchResponse:
        """
        Score, rank, truncate and cache the results for a query.

        Args:
            query: Search query
            items: Records to rank
            config: Effective configuration for this call

        Returns:
            SearchResponse
        """
        start_time = time.perf_counter()
        items = list(items or [])

        with self._lock:
            self._stats["total_queries"] += 1

        if not query or not query.strip():
            with self._lock:
                self._stats["empty_queries"] += 1
            return self._create_unfiltered_response(query or "", items, config, start_time)

        # Cache lookup, scoring and insertion are atomic per engine
        with self._lock:
            return self._search_with_cache(query, items, config, start_time)

    def _search_with_cache(
        self,
        query: str,
        items: List[Any],
        config: SearchConfig,
        start_time: float
    ) -> SearchResponse:
        cache_key = self._cache_key(query, config)
        cached = self.cache.get(cache_key)
        if cached is not None:
            execution_time = (time.perf_counter() - start_time) * 1000
            self._record_time(execution_time)
            logger.debug("Cache hit", query=query)
            return cached.model_copy(deep=True, update={
                "search_time_ms": execution_time,
                "query": query,
                "cache_hit": True
            })

        normalizer = TextNormalizer(config.case_sensitive)
        matcher = FuzzyMatcher(
            config.fuzzy_threshold, config.exact_match_boost, config.partial_match_boost
        )
        highlighter = Highlighter(config.case_sensitive)
        terms = normalizer.tokenize(query)

        results: List[SearchResult] = []
        for position, item in enumerate(items):
            try:
                result = self._score_item(item, terms, config, normalizer, matcher, highlighter)
            except Exception as e:
                with self._lock:
                    self._stats["failed_items"] += 1
                logger.debug("Item scoring failed", position=position, error=str(e))
                continue
            if result.score > 0:
                results.append(result)

        # Sort by score (descending); equal scores keep input order
        results.sort(key=lambda r: r.score, reverse=True)

        if not results:
            with self._lock:
                self._stats["no_matches"] += 1

        suggestions = self._generate_suggestions(query, items, config)
        execution_time = (time.perf_counter() - start_time) * 1000
        self._record_time(execution_time)

        response = SearchResponse(
            results=results[:config.max_results],
            total_count=len(results),
            search_time_ms=execution_time,
            query=query,
            suggestions=suggestions,
            cache_hit=False
        )

        # Callers own what they get back; the cache keeps its own copy
        self.cache.put(cache_key, response.model_copy(deep=True))
        logger.debug(
            "Search completed",
            query=query,
            total_count=response.total_count,
            returned=len(response.results),
            execution_time_ms=round(execution_time, 3)
        )
        return response

    def _score_item(
        self,
        item: Any,
        terms: List[str],
        config: SearchConfig,
        normalizer: TextNormalizer,
        matcher: FuzzyMatcher,
        highlighter: Highlighter
    ) -> SearchResult:
        """Score an individual record against the query terms."""
        total_score = 0.0
        matched_fields: List[str] = []
        highlights: Dict[str, str] = {}

        fields = config.search_fields or discover_fields(item)

        for field in dict.fromkeys(fields):
            value = get_nested_value(item, field)
            if value is None:
                continue

            field_score, highlight = self._score_field(
                stringify(value), terms, field, config, normalizer, matcher, highlighter
            )
            if field_score > 0:
                total_score += field_score
                matched_fields.append(field)
                if highlight is not None:
                    highlights[field] = highlight

        return SearchResult(
            item=item,
            score=total_score,
            matched_fields=matched_fields,
            highlights=highlights
        )

    def _score_field(
        self,
        value: str,
        terms: List[str],
        field: str,
        config: SearchConfig,
        normalizer: TextNormalizer,
        matcher: FuzzyMatcher,
        highlighter: Highlighter
    ) -> Tuple[float, Optional[str]]:
        """
        Score a field value against every query term.

        Each term contributes through its strongest match class only. The
        highlight of the last matching term is kept.

        Returns:
            Tuple of (field_score, highlight)
        """
        if not value:
            return 0.0, None

        normalized_value = normalizer.normalize(value)
        field_score = 0.0
        highlight = value

        for term in terms:
            match = matcher.classify(normalized_value, term)
            if match is None:
                continue
            match_type, score = match
            field_score += score
            highlight = highlighter.highlight(value, term, match_type)

        # Boost score for important fields
        field_name = field.lower()
        if any(name.lower() in field_name for name in config.important_fields):
            field_score *= config.important_field_boost

        return field_score, (highlight if field_score > 0 else None)

    def _generate_suggestions(
        self,
        query: str,
        items: List[Any],
        config: SearchConfig
    ) -> List[str]:
        """
        Suggest queries from the history and from common field values.

        Args:
            query: Search query
            items: Records being searched
            config: Effective configuration

        Returns:
            Up to five distinct suggestions in insertion order
        """
        query = query.strip()
        needle = query.lower()
        suggestions = dict.fromkeys(self.history.matching(query, HISTORY_SUGGESTIONS))

        for field in config.suggestion_fields:
            for item in items[:SUGGESTION_SCAN_LIMIT]:
                try:
                    value = get_nested_value(item, field)
                except Exception:
                    continue
                if isinstance(value, str) and value and needle in value.lower() and value != query:
                    suggestions[value] = None
                    if len(suggestions) >= MAX_SUGGESTIONS:
                        break
            if len(suggestions) >= MAX_SUGGESTIONS:
                break

        return list(suggestions)[:MAX_SUGGESTIONS]

    def _create_unfiltered_response(
        self,
        query: str,
        items: List[Any],
        config: SearchConfig,
        start_time: float
    ) -> SearchResponse:
        """Create the response for a blank query: every item, unscored."""
        results = [
            SearchResult(item=item, score=1, matched_fields=[], highlights={})
            for item in items[:config.max_results]
        ]
        execution_time = (time.perf_counter() - start_time) * 1000
        self._record_time(execution_time)

        return SearchResponse(
            results=results,
            total_count=len(items),
            search_time_ms=execution_time,
            query=query,
            suggestions=[],
            cache_hit=False
        )

    def _coerce_options(self, options: OptionsLike) -> SearchOptions:
        if options is None:
            return SearchOptions()
        if isinstance(options, SearchOptions):
            return options
        return SearchOptions(**options)

    def _effective_config(self, opts: SearchOptions) -> SearchConfig:
        overrides = opts.overrides()
        if not overrides:
            return self.config
        return SearchConfig(**{**self.config.model_dump(), **overrides})

    def _cache_key(self, query: str, config: SearchConfig) -> str:
        serialized = json.dumps(config.model_dump(), sort_keys=True)
        key_query = query.strip() if config.case_sensitive else query.strip().lower()
        return f"{key_query}_{serialized}"

    def _record_time(self, execution_time: float) -> None:
        with self._lock:
            self._stats["total_execution_time"] += execution_time

    def get_search_history(self) -> List[str]:
        """Get the search history, most recent first."""
        return self.history.to_list()

    def clear_cache(self) -> None:
        """Clear the result cache."""
        self.cache.clear()

    def clear_history(self) -> None:
        """Clear the search history."""
        self.history.clear()

    def get_cache_stats(self) -> CacheStats:
        """Get result cache statistics."""
        size = len(self.cache)
        return CacheStats(size=size, entries=size, hit_rate=self.cache.hit_rate)

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        with self._lock:
            stats = self._stats.copy()

        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        cache_stats = self.cache.get_stats()
        stats["cache_hits"] = cache_stats["hits"]
        stats["cache_misses"] = cache_stats["misses"]
        stats["cache_evictions"] = cache_stats["evictions"]
        stats["cache_size"] = len(self.cache)
        stats["history_size"] = len(self.history)

        return stats
