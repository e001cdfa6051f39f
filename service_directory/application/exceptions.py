class CatalogLoadError(ValueError):
    """Raised when the raw catalog is malformed (bad shape, missing numeric fields, duplicate ids)."""
    pass


class UnknownRecordError(LookupError):
    """Raised when an operation names a record id that is not in the catalog."""
    pass


class UnknownSessionError(LookupError):
    """Raised when a session id is not held by the session store."""
    pass
