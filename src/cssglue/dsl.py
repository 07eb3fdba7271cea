# dsl.py
from __future__ import annotations

from typing import Any, List, Optional

from .model import BuildTarget, FileGroup


# ---------------------------------------------------------------------
# File group helper
# ---------------------------------------------------------------------

def files(dest: str, *src: str, cwd: str | None = None) -> FileGroup:
    """Sources glued into `dest` (extension is added by the pipeline)."""
    return FileGroup(dest=dest, src=list(src), cwd=cwd)


# ---------------------------------------------------------------------
# Target helper
# ---------------------------------------------------------------------

def target(
    name: str,
    *groups: FileGroup,
    temp_dir: str | None = None,
    output: str | None = None,
    banner: str | None = None,
    banner_on: str | None = None,
    concat: Optional[dict[str, Any]] = None,
    less: Optional[dict[str, Any]] = None,
    sass: Optional[dict[str, Any]] = None,
    cssmin: Optional[dict[str, Any]] = None,
) -> BuildTarget:
    """
    Build target definition.

        target("app", files("dist/app", "a.css", "b.less"), banner="/*! app */")

    Options left as None fall back to the resolver defaults.
    """
    options = {
        "tempDir": temp_dir,
        "output": output,
        "banner": banner,
        "bannerOn": banner_on,
        "concat": concat,
        "less": less,
        "sass": sass,
        "cssmin": cssmin,
    }
    return BuildTarget(
        name=name,
        files=list(groups),
        options={k: v for k, v in options.items() if v is not None},
    )


def targets(*items: BuildTarget) -> List[BuildTarget]:
    """
    Build file helper:

        from cssglue import targets, target, files

        TARGETS = targets(
            target("app", files("dist/app", "src/app.less")),
        )
    """
    return list(items)
