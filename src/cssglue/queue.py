# queue.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Protocol, Set

from .errors import UnknownStage
from .model import JobDescriptor


class JobQueue(Protocol):
    def submit(self, job: JobDescriptor) -> str:
        """Accept a job and return the id to report for it."""
        ...


class RecordingQueue:
    """Keeps submitted jobs in order without running them (plan / dry run)."""

    def __init__(self) -> None:
        self.jobs: List[JobDescriptor] = []

    def submit(self, job: JobDescriptor) -> str:
        self.jobs.append(job)
        return job.name

    def names(self) -> List[str]:
        return [j.name for j in self.jobs]


Engine = Callable[[JobDescriptor], Any]


@dataclass
class JobResult:
    job: str
    dest: str
    value: Any = None


class SyncQueue:
    """
    Runs every job to completion inside submit().

    Submission order is execution order, so a stage can rely on the output
    of every job submitted before it.
    """

    def __init__(self, engines: Mapping[str, Engine]):
        self.engines: Dict[str, Engine] = dict(engines)
        self.results: List[JobResult] = []
        self._names: Set[str] = set()

    def submit(self, job: JobDescriptor) -> str:
        engine = self.engines.get(job.stage)
        if engine is None:
            raise UnknownStage(stage=job.stage, known=sorted(self.engines))
        if job.name in self._names:
            raise ValueError(f"Duplicate job name: {job.name}")

        self._names.add(job.name)
        value = engine(job)
        self.results.append(JobResult(job=job.name, dest=job.dest, value=value))
        return job.name
