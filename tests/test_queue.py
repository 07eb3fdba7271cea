from __future__ import annotations

from pathlib import Path

import pytest

from cssglue.engines import concat
from cssglue.errors import UnknownStage
from cssglue.model import FileGroup, JobDescriptor
from cssglue.options import resolve
from cssglue.pipeline import build_pipeline
from cssglue.queue import RecordingQueue, SyncQueue


def test_recording_queue_keeps_order() -> None:
    queue = RecordingQueue()
    first = JobDescriptor(stage="less", target="app_000000", src="a.less", dest="a.css")
    second = JobDescriptor(stage="concat", target="app_000001", src=("a.css",), dest="out.css")

    assert queue.submit(first) == "less:app_000000"
    assert queue.submit(second) == "concat:app_000001"
    assert queue.jobs == [first, second]
    assert queue.names() == ["less:app_000000", "concat:app_000001"]


def test_sync_queue_rejects_unknown_stage() -> None:
    queue = SyncQueue({})
    with pytest.raises(UnknownStage) as exc:
        queue.submit(JobDescriptor(stage="less", target="t_000000", src="a.less", dest="a.css"))
    assert exc.value.stage == "less"


def test_sync_queue_rejects_duplicate_job_names() -> None:
    queue = SyncQueue({"concat": lambda job: job.dest})
    job = JobDescriptor(stage="concat", target="t_000000", src=(), dest="a.css")
    queue.submit(job)
    with pytest.raises(ValueError, match="Duplicate job name"):
        queue.submit(job)


def test_sync_queue_runs_stages_in_submission_order(tmp_path: Path) -> None:
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    (src_dir / "a.css").write_text("a{}", encoding="utf-8")
    (src_dir / "b.less").write_text("@c: red; b{color:@c}", encoding="utf-8")

    seen: list[str] = []

    def fake_less(job: JobDescriptor) -> str:
        seen.append(job.name)
        out = Path(job.dest)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text("b{color:red}", encoding="utf-8")
        return job.dest

    def fake_cssmin(job: JobDescriptor) -> str:
        seen.append(job.name)
        # the concat output must already exist
        content = Path(job.src).read_text(encoding="utf-8")
        Path(job.dest).write_text(content.replace("\n", ""), encoding="utf-8")
        return job.dest

    def recording_concat(job: JobDescriptor) -> str:
        seen.append(job.name)
        return concat(job)

    queue = SyncQueue({"less": fake_less, "concat": recording_concat, "cssmin": fake_cssmin})
    options = resolve(
        {
            "tempDir": str(tmp_path / "tmp"),
            "banner": "/*!hdr*/\n",
            "concat": {"separator": "\n"},
        }
    )
    dest = str(tmp_path / "dist" / "app")

    names = build_pipeline(
        "app",
        [FileGroup(dest=dest, src=["a.css", "b.less"], cwd=str(src_dir))],
        options,
        queue,
    )

    assert seen == names
    assert [r.job for r in queue.results] == names
    assert (tmp_path / "dist" / "app.css").read_text(encoding="utf-8") == "/*!hdr*/\na{}\nb{color:red}"
    assert (tmp_path / "dist" / "app.min.css").read_text(encoding="utf-8") == "/*!hdr*/a{}b{color:red}"


def test_job_descriptor_compares_but_does_not_hash() -> None:
    job = JobDescriptor(stage="concat", target="t_000000", src=("a.css",), dest="out.css")

    assert job == JobDescriptor(stage="concat", target="t_000000", src=("a.css",), dest="out.css")
    with pytest.raises(TypeError):
        hash(job)
    with pytest.raises(TypeError):
        hash(FileGroup(dest="dist/app"))
