class BackendUnavailable(RuntimeError):
    """Raised by write operations when no database connection is configured."""

    code = "SERVICE_UNAVAILABLE"

    def __init__(self, detail: str = "Database not available"):
        super().__init__(detail)
        self.detail = detail
