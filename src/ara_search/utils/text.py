"""Text normalization helpers shared by the indexer and evaluator."""


def casefold(text: str) -> str:
    """Case-fold text for caseless substring matching."""
    return text.casefold()


def is_blank(text: str) -> bool:
    """True for None, empty, or whitespace-only text."""
    return not text or not text.strip()


def preview(text: str, length: int, suffix: str = "...") -> str:
    """
    Truncate text for display.
    
    Args:
        text: Full text
        length: Maximum characters kept before the suffix
        suffix: Appended only when text was actually cut
        
    Returns:
        Text unchanged if it fits, else the first `length` chars plus suffix
    """
    if length <= 0 or len(text) <= length:
        return text
    return text[:length] + suffix
