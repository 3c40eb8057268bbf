"""Result types for a single FFmpeg invocation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Success:
    """FFmpeg exited with status 0."""

    @property
    def ok(self) -> bool:
        return True

    def describe(self) -> str:
        return "Conversion completed successfully."


@dataclass(frozen=True)
class ProcessFailure:
    """FFmpeg ran but exited with a non-zero status.

    Attributes:
        returncode: The exit status. Negative values mean the process was
            terminated by that signal number.
    """

    returncode: int

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        return f"Command failed with exit status: {self.returncode}"


@dataclass(frozen=True)
class LaunchFailure:
    """FFmpeg could not be started or its status could not be observed.

    Attributes:
        message: The OS-level error description.
        error: The underlying exception, if any.
    """

    message: str
    error: OSError | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        return f"Error during execution: {self.message}"


Outcome = Success | ProcessFailure | LaunchFailure
