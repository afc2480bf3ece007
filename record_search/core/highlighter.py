"""Marks matched text inside field values."""

import re

from .fuzzy_matcher import MatchType


class Highlighter:
    """Wraps matched text in marker tags."""
    
    def __init__(
        self, 
        case_sensitive: bool = False, 
        open_tag: str = "<mark>", 
        close_tag: str = "</mark>"
    ) -> None:
        self.case_sensitive = case_sensitive
        self.open_tag = open_tag
        self.close_tag = close_tag
    
    def highlight(self, text: str, term: str, match_type: MatchType) -> str:
        """
        Render text with the matched term marked.
        
        Literal matches mark every occurrence of the term. Fuzzy matches
        mark the whole value. Any failure returns the text unchanged.
        
        Args:
            text: Raw field value
            term: Query token that matched
            match_type: How the token matched
            
        Returns:
            Marked-up text
        """
        if not term:
            return text
        
        if match_type is MatchType.FUZZY:
            return f"{self.open_tag}{text}{self.close_tag}"
        
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            pattern = re.compile(re.escape(term), flags)
            return pattern.sub(
                lambda m: f"{self.open_tag}{m.group(0)}{self.close_tag}", text
            )
        except (re.error, TypeError):
            return text
