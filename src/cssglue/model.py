# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


class Stage(Enum):
    """What happens to a single source file before concatenation."""
    PASS_THROUGH = "css"
    LESS = "less"
    SASS = "sass"


# job (stage) names handed to the queue
LESS = "less"
SASS = "sass"
CONCAT = "concat"
CSSMIN = "cssmin"


@dataclass(frozen=True)
class FileGroup:
    """Source files glued into one destination (dest is pre-extension)."""
    __hash__ = None  # type: ignore[assignment]

    dest: str
    src: List[str] = field(default_factory=list)
    cwd: Optional[str] = None


@dataclass
class BuildTarget:
    """A named unit of work: file groups + raw user options."""
    name: str
    files: List[FileGroup] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedOptions:
    """
    Fully merged options for one build target invocation.

    Stage bags are read-only mappings; build a new instance instead of
    mutating one.
    """
    __hash__ = None  # type: ignore[assignment]

    temp_dir: str
    output: str
    banner: str
    banner_on: str
    minify: bool
    keep_clean_output: bool
    concat: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    less: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    sass: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    cssmin: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def stage_options(self, stage: str) -> Mapping[str, Any]:
        return getattr(self, stage)


Source = Union[str, Tuple[str, ...]]


@dataclass(frozen=True)
class JobDescriptor:
    __hash__ = None  # type: ignore[assignment]

    stage: str
    target: str
    src: Source
    dest: str
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def name(self) -> str:
        return f"{self.stage}:{self.target}"

    def config(self) -> Dict[str, Any]:
        """The {src, dest, options} payload handed to a queue."""
        src = list(self.src) if isinstance(self.src, tuple) else self.src
        return {"src": src, "dest": self.dest, "options": dict(self.options)}
