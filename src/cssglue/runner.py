# runner.py
from __future__ import annotations

import runpy
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import BuildFileError
from .model import BuildTarget
from .naming import TargetNamer
from .options import resolve
from .pipeline import build_pipeline
from .queue import JobQueue
from .ui.console import Console, get_console


# ----------------------------------------------------------------------
# Build file loading
# ----------------------------------------------------------------------

def load_build(path: str | Path) -> List[BuildTarget]:
    """
    Load build targets from a python file.

    The file must define either:
      - targets() -> List[BuildTarget]
      - TARGETS = [BuildTarget, ...]
    """
    build_path = Path(path).expanduser().resolve()
    if not build_path.exists():
        raise BuildFileError(f"Build file not found: {build_path}")
    if build_path.suffix != ".py":
        raise BuildFileError(f"Build file must be a .py file, got: {build_path.name}")

    module_name = f"cssglue_build_{build_path.stem}"
    globals_dict = runpy.run_path(str(build_path), run_name=module_name)

    loaded = None
    if "TARGETS" in globals_dict:
        loaded = globals_dict["TARGETS"]
    elif "targets" in globals_dict and callable(globals_dict["targets"]):
        try:
            loaded = globals_dict["targets"]()
        except TypeError as e:
            raise BuildFileError(
                "targets() was called with no arguments and failed. If you imported the "
                "'targets' helper, define TARGETS = targets(...) instead of a targets() function."
            ) from e

    if not isinstance(loaded, list) or not all(isinstance(t, BuildTarget) for t in loaded):
        raise BuildFileError(
            "Build file must return/define a List[BuildTarget]. "
            "Define targets() -> List[BuildTarget] or TARGETS = [BuildTarget, ...]."
        )

    names = [t.name for t in loaded]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise BuildFileError(f"Duplicate target names found: {dupes}")

    return loaded


def select_targets(all_targets: List[BuildTarget], names: Iterable[str] = ()) -> List[BuildTarget]:
    # repeated names run once, first occurrence keeps its place
    names = list(dict.fromkeys(names))
    if not names:
        return list(all_targets)

    by_name = {t.name: t for t in all_targets}
    missing = [n for n in names if n not in by_name]
    if missing:
        raise BuildFileError(f"Unknown target(s) {missing}. Known targets: {sorted(by_name)}")
    return [by_name[n] for n in names]


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_target(
    target: BuildTarget,
    queue: JobQueue,
    *,
    namer: Optional[TargetNamer] = None,
    console: Optional[Console] = None,
) -> List[str]:
    """Resolve options once, then queue the target's job chain."""
    console = console or get_console()
    console.print_target_start(target.name)

    options = resolve(target.options)
    console.print_debug(
        f"{target.name}: output={options.output} bannerOn={options.banner_on} tempDir={options.temp_dir}"
    )
    return build_pipeline(
        target.name,
        target.files,
        options,
        queue,
        namer=namer,
        console=console,
    )


def run_targets(
    targets: Iterable[BuildTarget],
    queue: JobQueue,
    *,
    console: Optional[Console] = None,
) -> Dict[str, List[str]]:
    """
    Run targets one after another. The first failure propagates; targets
    that already ran keep their queued jobs.
    """
    results: Dict[str, List[str]] = {}
    for target in targets:
        # fresh namer per invocation
        results[target.name] = run_target(target, queue, namer=TargetNamer(), console=console)
    return results
