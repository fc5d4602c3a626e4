class FeedImportError(Exception):
    """Base class for errors that abort a whole feed import run."""


class MissingFeedUrlError(FeedImportError):
    pass


class FetchError(FeedImportError):
    """A URL could not be fetched (transport failure or non-2xx response)."""


class InvalidFeedError(FeedImportError):
    """The feed body or one of its entries does not have the expected shape."""


class InvalidGtinError(InvalidFeedError):
    pass


class InvalidDateError(InvalidFeedError):
    pass


class DuplicatePathError(Exception):
    """
    Raised when an element is saved under a full path that is already taken.

    Not a FeedImportError: the importer contains it per entry.
    """

    def __init__(self, path):
        self.path = path
        super().__init__(f"Duplicate full path [ {path} ] - cannot save element")
