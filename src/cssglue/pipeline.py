# pipeline.py
from __future__ import annotations

import os
from typing import Iterable, List, Optional

from .classify import classify
from .model import CONCAT, CSSMIN, LESS, SASS, FileGroup, JobDescriptor, ResolvedOptions, Stage
from .naming import TargetNamer
from .queue import JobQueue
from .ui.console import Console, get_console

PREPROCESSOR_JOBS = {
    Stage.LESS: LESS,
    Stage.SASS: SASS,
}


def ensure_extension(filename: str, extension: str, replace: Optional[str] = None) -> str:
    """
    Make `filename` end with `extension`, dropping a trailing `replace` first.

    ensure_extension("a.min.css", ".css", ".min.css")  -> "a.css"
    ensure_extension("a.css", ".min.css", ".css")      -> "a.min.css"
    ensure_extension("a.min.css", ".min.css", ".css")  -> "a.min.css"
    """
    if replace and replace != extension and extension.endswith(replace) and filename.endswith(extension):
        return filename
    if replace and filename.endswith(replace):
        filename = filename[: len(filename) - len(replace)]
    if not filename.endswith(extension):
        filename += extension
    return filename


def temp_path(temp_dir: str, path: str) -> str:
    """Mirror `path` (relative or absolute) below `temp_dir`."""
    rel = os.path.splitdrive(path)[1].lstrip("/\\")
    return os.path.join(temp_dir, rel)


def source_path(group: FileGroup, src: str) -> str:
    return os.path.join(group.cwd or "", src)


def concat_dest(group: FileGroup, options: ResolvedOptions) -> str:
    # straight to the destination if the clean file is kept, else scratch space
    if options.keep_clean_output:
        return ensure_extension(group.dest, ".css", ".min.css")
    return temp_path(options.temp_dir, group.dest)


def minified_dest(group: FileGroup) -> str:
    return ensure_extension(group.dest, ".min.css", ".css")


def plan_file_group(
    target_name: str,
    group: FileGroup,
    options: ResolvedOptions,
    namer: TargetNamer,
) -> Iterable[JobDescriptor]:
    """
    Yield the jobs for one file group in execution order.

    Lazy: a source with an unsupported extension raises after every job
    before it has been yielded (and possibly submitted).
    """
    concat_inputs: List[str] = []

    # -- preprocess or pass through --
    for src in group.src:
        src = source_path(group, src)
        stage = classify(src)

        if stage is Stage.PASS_THROUGH:
            concat_inputs.append(src)
            continue

        job_name = PREPROCESSOR_JOBS[stage]
        tmp_dest = temp_path(options.temp_dir, src) + ".css"
        yield JobDescriptor(
            stage=job_name,
            target=namer(target_name),
            src=src,
            dest=tmp_dest,
            options=options.stage_options(job_name),
        )
        # the preprocessor output is the next stage's input
        concat_inputs.append(tmp_dest)

    # -- concat --
    glued = concat_dest(group, options)
    yield JobDescriptor(
        stage=CONCAT,
        target=namer(target_name),
        src=tuple(concat_inputs),
        dest=glued,
        options=options.concat,
    )

    # -- minify --
    if options.minify:
        yield JobDescriptor(
            stage=CSSMIN,
            target=namer(target_name),
            src=glued,
            dest=minified_dest(group),
            options=options.cssmin,
        )


def build_pipeline(
    target_name: str,
    file_groups: Iterable[FileGroup],
    options: ResolvedOptions,
    queue: JobQueue,
    *,
    namer: Optional[TargetNamer] = None,
    console: Optional[Console] = None,
) -> List[str]:
    """
    Submit the job chain of every file group and return the queued job ids.

    Raises:
        UnsupportedSourceKind: a source cannot be processed. Jobs submitted
            before it stay queued.
    """
    namer = namer or TargetNamer()
    console = console or get_console()
    queued: List[str] = []

    for group in file_groups:
        for job in plan_file_group(target_name, group, options, namer):
            queued.append(queue.submit(job))
            console.print_job_queued(job)

    console.print_queued(queued)
    return queued
