class FeedError(Exception):
    """Base exception for surf feed errors."""
    pass

class FeedFetchError(FeedError):
    """Raised when the feed cannot be retrieved or is not text."""
    pass
