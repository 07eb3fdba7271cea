from .dsl import files, target, targets
from .model import BuildTarget, FileGroup, JobDescriptor, ResolvedOptions
from .options import resolve
from .pipeline import build_pipeline
from .runner import run_target, run_targets

__all__ = [
    "files", "target", "targets",
    "BuildTarget", "FileGroup", "JobDescriptor", "ResolvedOptions",
    "resolve", "build_pipeline", "run_target", "run_targets",
]
