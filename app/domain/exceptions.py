"""Domain exceptions, mapped to HTTP responses by the API error handlers."""


class GeoLookupError(Exception):
    """Base class for all service errors."""


class AddressLoadError(GeoLookupError):
    """The address dataset is unreadable or malformed."""


class AddressNotFoundError(GeoLookupError):
    def __init__(self, guid: str):
        super().__init__(f"Address not found: {guid}")
        self.guid = guid


class JobNotFoundError(GeoLookupError):
    def __init__(self, handle: str):
        super().__init__(f"Area search result not found: {handle}")
        self.handle = handle


class JobStateError(GeoLookupError):
    """Contract violation on the job registry (unknown handle, double finish)."""
