# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class CssGlueError(Exception):
    """Base class for every failure that aborts a build target."""


@dataclass
class UnsupportedSourceKind(CssGlueError):
    path: str
    supported: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        exts = ", ".join(f'"{e}"' for e in self.supported)
        return f'Cannot process source file "{self.path}". Only {exts} files are supported.'


@dataclass
class InvalidOptionValue(CssGlueError):
    option: str
    value: object
    valid: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        valid = '", "'.join(self.valid)
        return f'Invalid {self.option} option: "{self.value}". Valid options: ["{valid}"].'


@dataclass
class StageFailure(CssGlueError):
    """A stage engine ran but did not produce its output."""
    job: str
    cmd: str
    exit_code: int
    stderr: str = ""

    def __str__(self) -> str:
        msg = f"[{self.job}] failed (exit={self.exit_code}): {self.cmd}"
        if self.stderr:
            msg += "\n" + self.stderr.strip()
        return msg


@dataclass
class ToolUnavailable(CssGlueError):
    tool: str
    hint: str

    def __str__(self) -> str:
        return f"{self.tool} is not available. {self.hint}"


@dataclass
class UnknownStage(CssGlueError):
    stage: str
    known: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"No engine registered for stage '{self.stage}'. Known stages: {self.known}"


class BuildFileError(CssGlueError):
    """The build file is missing or does not define any targets."""
