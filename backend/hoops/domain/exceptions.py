"""Domain-specific exceptions — framework-independent."""


class IdentityGenerationError(Exception):
    """Raised when a new hoop cannot be given an identifier."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unable to generate hoop id: {reason}")


class HoopAlreadySavedError(Exception):
    """Raised when a saved hoop is mutated, or its image is assigned twice."""

    def __init__(self, hoop_id: str, field: str):
        self.hoop_id = hoop_id
        self.field = field
        super().__init__(f"Hoop '{hoop_id}' can no longer change {field}")


class UnsupportedMediaTypeError(Exception):
    """Raised when an attachment's content type has no known file extension."""

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f"Unknown MIME type '{content_type}'")


class RecordNotFoundError(Exception):
    """Raised when no saved record exists for a storage key or path."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Hoop record '{key}' not found")


class RecordFormatError(Exception):
    """Raised when a saved record cannot be decoded."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"Hoop record '{key}' is unreadable: {message}")


class FeedDiscoveryError(Exception):
    """Base class for failures while locating a worksheet's row-insertion URL."""


class FeedFormatError(FeedDiscoveryError):
    """Raised when a fetched feed is not a well-formed Atom feed."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(f"Malformed feed at {url}: {message}")


class LinkRelationNotFoundError(FeedDiscoveryError):
    """Raised when a feed or entry carries no link with the requested relation."""

    def __init__(self, rel: str, source: str):
        self.rel = rel
        self.source = source
        super().__init__(f"No link with rel '{rel}' in {source}")


class WorksheetNotFoundError(FeedDiscoveryError):
    """Raised when the worksheet feed has no entry at the configured index."""

    def __init__(self, index: int, available: int):
        self.index = index
        self.available = available
        super().__init__(
            f"Worksheet index {index} out of range ({available} worksheet(s))"
        )


class SpreadsheetRequestError(Exception):
    """Raised when the spreadsheet service answers with a non-success status."""

    def __init__(self, url: str, status_code: int, message: str):
        self.url = url
        self.status_code = status_code
        self.message = message
        super().__init__(f"[spreadsheets] {status_code} from {url}: {message}")


class CredentialsUnavailableError(Exception):
    """Raised when no usable OAuth token is available for the spreadsheet API."""
