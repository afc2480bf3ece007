"""Text normalization utilities for query tokens and field values."""

import re
from typing import Any, List, Mapping, Sequence


class TextNormalizer:
    """Handles case folding, tokenization and value stringification."""
    
    def __init__(self, case_sensitive: bool = False) -> None:
        """
        Initialize the normalizer.
        
        Args:
            case_sensitive: Preserve case when normalizing
        """
        self.case_sensitive = case_sensitive
        self.whitespace_regex = re.compile(r'\s+')
        
    def normalize(self, text: str) -> str:
        """
        Fold the case of text unless the normalizer is case sensitive.
        
        Args:
            text: Input text to normalize
            
        Returns:
            Normalized text
        """
        if not text:
            return ""
        
        return text if self.case_sensitive else text.lower()
    
    def tokenize(self, query: str) -> List[str]:
        """
        Split a query into normalized whitespace-delimited terms.
        
        Args:
            query: Raw query text
            
        Returns:
            List of non-empty tokens
        """
        if not query:
            return []
        
        return [
            self.normalize(term)
            for term in self.whitespace_regex.split(query.strip())
            if term
        ]


def stringify(value: Any) -> str:
    """Render a field value as searchable text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, bytes, bytearray)):
        return str(value)
    if isinstance(value, Sequence):
        return ",".join("" if v is None else stringify(v) for v in value)
    return str(value)
