"""Exception hierarchy.

Every failure in the pipeline is fatal. Leaf functions raise; ``wu.cli.main``
is the only place that prints the message and exits. Each class names its exit
code and whether the message belongs on stdout or stderr.
"""

from __future__ import annotations


class WuError(Exception):
    exit_code = 1
    to_stdout = False

    def render(self) -> str:
        return f"Fatal error\n{self}"


class ConfigError(WuError):
    """Settings file exists but cannot be used."""


class MissingConfigError(ConfigError):
    exit_code = 0
    to_stdout = True

    def __init__(self, message: str = "You must create a .condrc file in $HOME.") -> None:
        super().__init__(message)

    def render(self) -> str:
        return str(self)


class EarlyExit(WuError):
    """Help or version text requested; print it and stop."""

    exit_code = 0
    to_stdout = True

    def render(self) -> str:
        return str(self)


class UsageError(WuError):
    to_stdout = True

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def render(self) -> str:
        return str(self)


class FetchError(WuError):
    pass


class HttpStatusError(FetchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Bad HTTP Status: {status_code}")
        self.status_code = status_code

    def render(self) -> str:
        return str(self)


class TransportError(FetchError):
    pass


class DecodeError(WuError):
    pass


class ApiError(WuError):
    """The API answered 200 but reported an error in the response envelope."""

    def __init__(self, error_type: str, description: str) -> None:
        super().__init__(f"{error_type}: {description}" if error_type else description)
        self.error_type = error_type
        self.description = description

    def render(self) -> str:
        return f"Weather Underground error\n{self}"


class AmbiguousLocationError(WuError):
    def __init__(self, candidates: list[str]) -> None:
        self.candidates = candidates
        lines = ["Multiple locations match; choose one with -s:"]
        lines.extend(f"  {c}" for c in candidates)
        super().__init__("\n".join(lines))

    def render(self) -> str:
        return str(self)
