class StorageFault(Exception):
    """The database is unreachable or its schema is missing/malformed."""
