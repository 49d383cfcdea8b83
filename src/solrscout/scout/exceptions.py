"""Engine-level exceptions."""


class EngineError(Exception):
    """Base exception for search engine errors."""


class EngineNotFoundError(EngineError):
    """Raised when a requested engine is not registered or initialized."""
