# engines.py
from __future__ import annotations

import os
import re
import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

from .errors import StageFailure, ToolUnavailable
from .model import CONCAT, CSSMIN, LESS, SASS, JobDescriptor

# ---------------------------------------------------------------------
# Stage engines used by SyncQueue.
#
# concat is done in-process; the preprocessors and the minifier are the
# usual node/dart command line tools, called one job at a time.
# ---------------------------------------------------------------------

TOOL_HINTS = {
    "lessc": "Install less (e.g., npm install -g less).",
    "sass": "Install Dart Sass (e.g., npm install -g sass).",
    "cleancss": "Install clean-css-cli (e.g., npm install -g clean-css-cli).",
}

_BANNER_RE = re.compile(r"^\s*/\*(?!!)[\s\S]*?\*/\s*")


def _write(dest: str, content: str) -> None:
    path = Path(dest)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _strip_banner(content: str) -> str:
    return _BANNER_RE.sub("", content, count=1)


# ---------------------------------------------------------------------
# concat
# ---------------------------------------------------------------------

def concat(job: JobDescriptor) -> str:
    """Glue job.src into job.dest with banner, separator and footer."""
    opts = job.options
    sources = [job.src] if isinstance(job.src, str) else list(job.src)
    process = opts.get("process")

    parts: List[str] = []
    for src in sources:
        content = Path(src).read_text(encoding="utf-8")
        if opts.get("stripBanners"):
            content = _strip_banner(content)
        if callable(process):
            content = process(content, src)
        parts.append(content)

    separator = opts.get("separator", os.linesep)
    output = (opts.get("banner") or "") + separator.join(parts) + (opts.get("footer") or "")
    _write(job.dest, output)
    return job.dest


# ---------------------------------------------------------------------
# command line engines
# ---------------------------------------------------------------------

def less_args(opts: Mapping[str, Any]) -> List[str]:
    args: List[str] = []
    if opts.get("strictMath"):
        args.append("--strict-math=on")
    if opts.get("strictUnits"):
        args.append("--strict-units=on")
    if opts.get("ieCompat"):
        args.append("--ie-compat")
    if opts.get("relativeUrls"):
        args.append("--relative-urls")
    if opts.get("rootpath"):
        args.append(f"--rootpath={opts['rootpath']}")
    paths = opts.get("paths")
    if paths:
        paths = [paths] if isinstance(paths, str) else list(paths)
        args.append(f"--include-path={os.pathsep.join(paths)}")
    for name, value in (opts.get("modifyVars") or {}).items():
        args.append(f"--modify-var={name}={value}")
    return args


def sass_args(opts: Mapping[str, Any]) -> List[str]:
    args = [f"--style={opts.get('style', 'expanded')}"]
    if opts.get("sourcemap", "none") == "none":
        args.append("--no-source-map")
    if opts.get("quiet"):
        args.append("--quiet")
    load_path = opts.get("loadPath")
    if load_path:
        for p in [load_path] if isinstance(load_path, str) else load_path:
            args.append(f"--load-path={p}")
    return args


def cssmin_args(opts: Mapping[str, Any]) -> List[str]:
    level1 = [f"roundingPrecision:{opts.get('roundingPrecision', 2)}"]
    if opts.get("keepSpecialComments", 0) == 0:
        level1.append("specialComments:0")
    args = ["-O1", ";".join(level1)]
    if opts.get("advanced"):
        args.append("-O2")
    if opts.get("keepBreaks"):
        args.extend(["--format", "keep-breaks"])
    if opts.get("compatibility"):
        args.extend(["--compatibility", str(opts["compatibility"])])
    return args


class CommandEngine:
    """Run one command line tool per job: `tool <args> <src> -> <dest>`."""

    def __init__(
        self,
        tool: str,
        build_args: Callable[[Mapping[str, Any]], List[str]],
        *,
        output_flag: str | None = None,
    ):
        self.tool = tool
        self.build_args = build_args
        self.output_flag = output_flag

    def check_available(self) -> str:
        exe = shutil.which(self.tool)
        if exe is None:
            hint = TOOL_HINTS.get(self.tool, f"Install {self.tool} or fix PATH.")
            raise ToolUnavailable(tool=self.tool, hint=hint)
        return exe

    def command(self, job: JobDescriptor) -> List[str]:
        sources = [job.src] if isinstance(job.src, str) else list(job.src)
        cmd = [self.tool, *self.build_args(job.options)]
        if self.output_flag:
            return cmd + [self.output_flag, job.dest, *sources]
        return cmd + [*sources, job.dest]

    def __call__(self, job: JobDescriptor) -> str:
        self.check_available()
        Path(job.dest).parent.mkdir(parents=True, exist_ok=True)
        cmd = self.command(job)

        proc = subprocess.run(cmd, text=True, capture_output=True)
        if proc.returncode != 0:
            raise StageFailure(
                job=job.name,
                cmd=" ".join(cmd),
                exit_code=proc.returncode,
                stderr=proc.stderr[-4000:],
            )

        banner = job.options.get("banner")
        if banner:
            path = Path(job.dest)
            path.write_text(banner + path.read_text(encoding="utf-8"), encoding="utf-8")
        return job.dest


def default_engines() -> Dict[str, Callable[[JobDescriptor], Any]]:
    return {
        LESS: CommandEngine("lessc", less_args),
        SASS: CommandEngine("sass", sass_args),
        CONCAT: concat,
        CSSMIN: CommandEngine("cleancss", cssmin_args, output_flag="-o"),
    }
