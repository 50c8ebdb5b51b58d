"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTimeEntry(DomainError):
    """Raised when a time entry cannot be submitted as typed."""

    def __init__(self, message: str):
        self.reason = message
        super().__init__(message)


class TimerAlreadyRunning(DomainError):
    """Raised when starting a timer while another one is active."""

    def __init__(self, issue_key: str):
        self.issue_key = issue_key
        super().__init__(f"A timer is already running for {issue_key}")


class InvalidWorklogData(DomainError):
    """Raised when worklog records cannot be read."""

    def __init__(self, source: str, detail: str):
        self.source = source
        super().__init__(f"Unreadable worklogs in {source}: {detail}")
