"""Content store exceptions."""


class TrollyError(Exception):
    """Base content store error."""
    pass


class UnknownUriError(TrollyError, ValueError):
    """The identifier does not match any known route."""

    def __init__(self, uri: str):
        super().__init__(f"Unknown URI {uri}")
        self.uri = uri


class InvalidColumnError(TrollyError, ValueError):
    """A projection named a column outside the allow-list."""

    def __init__(self, column: str):
        super().__init__(f"Invalid column {column}")
        self.column = column


class InsertFailedError(TrollyError):
    """The store did not produce a new row for an insert."""

    def __init__(self, uri: str):
        super().__init__(f"Failed to insert row into {uri}")
        self.uri = uri


class SchemaDowngradeError(TrollyError):
    """The database file was written by a newer schema version."""

    def __init__(self, current: int, requested: int):
        super().__init__(
            f"Can't downgrade database from version {current} to {requested}"
        )
        self.current = current
        self.requested = requested
