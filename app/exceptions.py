# app/exceptions.py


class DatabaseConnectionError(RuntimeError):
    """
    Raised at startup when the database cannot be reached.
    """


class DatabaseQueryError(RuntimeError):
    """
    Raised when a request cannot read from the database. Fatal for the process.
    """
