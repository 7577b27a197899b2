"""Exception hierarchy for polling_finder."""


class PollingFinderError(Exception):
    """Base exception for all polling_finder errors."""


class DirectoryError(PollingFinderError):
    """A station directory query could not be executed."""

    def __init__(self, query: str, detail: str):
        self.query = query
        self.detail = detail
        super().__init__(f"Station directory query '{query}' failed: {detail}")
