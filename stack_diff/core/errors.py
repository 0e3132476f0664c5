"""
Error taxonomy for stack dump comparison.

Every error here is fatal for the current run: it is raised where the
problem is detected and propagated untouched up to the CLI, which reports
it and exits with a non-zero status. No stage recovers locally and no
partial output is produced.
"""

from typing import Optional


class StackDiffError(Exception):
    """Base class for all stack-diff failures."""


class ConfigError(StackDiffError):
    """A required option is missing or an option value is invalid."""


class DumpReadError(StackDiffError, OSError):
    """A dump file could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't read file '{path}': {reason}")

    def __str__(self) -> str:
        return f"couldn't read file '{self.path}': {self.reason}"


class ParseError(StackDiffError, ValueError):
    """A record in a dump is malformed."""

    def __init__(self, message: str, record_index: Optional[int] = None,
                 token: Optional[str] = None):
        self.message = message
        self.record_index = record_index
        self.token = token
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = self.message
        if self.token is not None:
            text = f"{text}: '{self.token}'"
        if self.record_index is not None:
            text = f"record {self.record_index}: {text}"
        return text

    def __str__(self) -> str:
        return self._describe()


class ReportWriteError(StackDiffError, OSError):
    """A report file could not be written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"couldn't write report '{path}': {reason}")

    def __str__(self) -> str:
        return f"couldn't write report '{self.path}': {self.reason}"
