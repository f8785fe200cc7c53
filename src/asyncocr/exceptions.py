# asyncocr/exceptions.py
class AsyncOCRError(Exception):
    """Base exception for the asyncOCR library."""
    pass

class FileProcessingError(AsyncOCRError):
    """Raised when a single document cannot be read."""
    pass

class DocumentCreationError(AsyncOCRError):
    """Raised when the sample documents cannot be created."""
    pass
