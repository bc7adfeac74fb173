"""Storage failures surfaced to callers. Each carries a short machine-readable code."""


class StoreError(Exception):
    """Base for persistence failures with a client-facing code."""
    def __init__(self, message: str, code: str = "store_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class StorageIOError(StoreError):
    """Directory creation, read, write, delete or stat failed."""
    def __init__(self, message: str):
        super().__init__(message, code="storage_io_error")


class MediaNotFoundError(StoreError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Media file '{name}' not found", code="media_not_found")


class PlanFormatError(StoreError):
    """Stored document is not valid JSON or does not fit the current schema."""
    def __init__(self, message: str):
        super().__init__(message, code="plan_format_error")


class InvalidMediaName(StoreError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid media file name '{name}': must be a plain file name",
            code="invalid_media_name",
        )
