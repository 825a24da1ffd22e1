"""Error taxonomy for fetching and persisting gallery data."""


class GalleryError(Exception):
    """Base class for gallery errors."""


class FetchError(GalleryError):
    """A remote listing could not be fetched or decoded."""


class CacheCorruptionError(GalleryError):
    """A cached value is present but cannot be parsed."""


class PersistenceError(GalleryError):
    """The key-value store rejected a write."""
