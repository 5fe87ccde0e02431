"""Error kinds surfaced by the dispatch pipeline.

Every fatal error carries a message and an optional one-line hint describing
the most likely remediation. The CLI prints both and exits non-zero.

"No candidates" is not an error: it is returned as the NoCandidates sentinel
so callers can treat it as a clean exit.
"""

from dataclasses import dataclass


class DispatchError(Exception):
    """Base class for fatal pipeline errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigurationMissing(DispatchError):
    """A required environment variable is absent."""

    def __init__(self, missing: list[str]) -> None:
        names = ", ".join(missing)
        super().__init__(
            f"{names} not found in environment",
            hint="Set the variable(s) in your shell or in a .env file",
        )
        self.missing = missing


class AuthenticationFailed(DispatchError):
    """The identity lookup was rejected."""


class RemoteRequestFailed(DispatchError):
    """A search, list or dispatch call failed.

    Attributes:
        operation: Pipeline stage that issued the failing call
            (e.g. "fetch pull requests", "dispatch workflow")
    """

    def __init__(self, operation: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.operation = operation


class EmptyResult(DispatchError):
    """A remote listing that must not be empty came back empty."""


class UserCancelled(DispatchError):
    """The user aborted an interactive prompt."""

    def __init__(self) -> None:
        super().__init__("Cancelled.")


@dataclass(frozen=True)
class NoCandidates:
    """Sentinel: the current user has no open pull requests in the repository."""

    owner: str
    repo: str
    author: str

    @property
    def message(self) -> str:
        return "No open pull requests found for your user"
