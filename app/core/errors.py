class JokesError(Exception):
    """Base class for failures raised by the joke and favorites services."""

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class FetchError(JokesError):
    pass


class NetworkTransportError(FetchError):
    """Connection failure, timeout or non-2xx response."""


class ResponseDecodeError(FetchError):
    """Body was not JSON or did not match the joke record."""


class PersistError(JokesError):
    pass


class StorageSerializeError(PersistError):
    pass


class StorageWriteError(PersistError):
    pass


class StorageReadError(PersistError):
    pass


class StorageDecodeError(PersistError):
    pass
