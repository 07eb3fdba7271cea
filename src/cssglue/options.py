# options.py
from __future__ import annotations

import copy
import os
import tempfile
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from .errors import InvalidOptionValue
from .model import CONCAT, CSSMIN, LESS, SASS, ResolvedOptions

# ---------------------------------------------------------------------
# Layers
# ---------------------------------------------------------------------
# resolved = STAGE_DEFAULTS <- top-level defaults <- user config <- policy
#
# Every layer is a plain mapping and is never mutated. Stage bags
# (concat/less/sass/cssmin) merge key by key, everything else replaces.
# ---------------------------------------------------------------------

STAGES = (CONCAT, LESS, SASS, CSSMIN)

OUTPUT_MODES = ["clean", "minified", "both"]
CLEAN_MODES = ("clean", "both")
MINIFIED_MODES = ("minified", "both")

# Baselines that switch off the engines' own defaults.
STAGE_DEFAULTS: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    CONCAT: MappingProxyType({
        "separator": os.linesep,
        "footer": "",
        "stripBanners": False,
        "process": False,
        "sourceMap": False,
        "sourceMapName": None,
        "sourceMapStyle": "embed",
    }),
    LESS: MappingProxyType({
        # parse options
        "paths": False,
        "optimization": False,
        "filename": False,
        "strictImports": False,
        "syncImport": False,
        "dumpLineNumbers": False,
        "relativeUrls": False,
        "rootpath": False,
        # render options
        "ieCompat": False,
        "strictMath": True,
        "strictUnits": True,
        "outputSourceFiles": False,
        "modifyVars": None,
    }),
    SASS: MappingProxyType({
        "precision": 5,
        "quiet": False,
        "compass": False,
        "debugInfo": False,
        "lineNumbers": False,
        "loadPath": None,
        "require": None,
        "cachePath": None,
        "noCache": False,
        "bundleExec": False,
    }),
    CSSMIN: MappingProxyType({
        "advanced": False,
        "aggressiveMerging": True,
        "benchmark": False,
        "compatibility": "",
        "debug": False,
        "inliner": None,
        "keepBreaks": False,
        "processImport": False,
        "rebase": True,
        "relativeTo": None,
        "root": None,
        "roundingPrecision": 2,
        "target": None,
    }),
})


def base_layer() -> Dict[str, Any]:
    layer: Dict[str, Any] = {
        "tempDir": tempfile.gettempdir(),
        "output": "both",
        "banner": "",
        "bannerOn": "both",
    }
    for stage in STAGES:
        layer[stage] = STAGE_DEFAULTS[stage]
    return layer


def policy_layer(opts: Mapping[str, Any]) -> Dict[str, Any]:
    """Overrides applied after user config; users cannot turn these off."""
    minify = opts["output"] in MINIFIED_MODES
    keep_clean = opts["output"] in CLEAN_MODES
    banner_on_clean = opts["bannerOn"] in CLEAN_MODES
    banner_on_minified = opts["bannerOn"] in MINIFIED_MODES

    return {
        # banner goes on the clean file only if it survives the build
        CONCAT: {
            "banner": opts["banner"] if (keep_clean and banner_on_clean) else "",
        },
        # banners and source maps are never the preprocessors' job
        LESS: {
            "sourceMap": False,
            "banner": "",
            "compress": False,
            "cleancss": False,
        },
        SASS: {
            "sourcemap": "none",
            "banner": False,
            "style": "expanded",
            "update": False,
            "check": False,
        },
        CSSMIN: {
            "banner": opts["banner"] if (minify and banner_on_minified) else "",
            "report": "min",
            "keepSpecialComments": 0,
        },
    }


# ---------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------

def merge_layers(layers: Iterable[Optional[Mapping[str, Any]]]) -> Dict[str, Any]:
    """Fold layers left to right into a new dict; stage bag values are deep copies."""
    merged: Dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if key in STAGES:
                bag = dict(merged.get(key) or {})
                bag.update({k: copy.deepcopy(v) for k, v in (value or {}).items()})
                merged[key] = bag
            else:
                merged[key] = value
    return merged


def _validate(opts: Mapping[str, Any]) -> None:
    for key in ("output", "bannerOn"):
        if opts[key] not in OUTPUT_MODES:
            raise InvalidOptionValue(option=key, value=opts[key], valid=list(OUTPUT_MODES))


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def resolve(config: Optional[Mapping[str, Any]] = None) -> ResolvedOptions:
    """
    Resolve raw user options for one build target.

    Recognized keys: tempDir, concat, less, sass, cssmin, output, banner,
    bannerOn. Unknown keys are ignored.

    Raises:
        InvalidOptionValue: output or bannerOn is not clean/minified/both
    """
    user = {k: v for k, v in (config or {}).items() if v is not None}
    opts = merge_layers([base_layer(), user])
    _validate(opts)
    opts = merge_layers([opts, policy_layer(opts)])

    return ResolvedOptions(
        temp_dir=str(opts["tempDir"]),
        output=opts["output"],
        banner=opts["banner"] or "",
        banner_on=opts["bannerOn"],
        minify=opts["output"] in MINIFIED_MODES,
        keep_clean_output=opts["output"] in CLEAN_MODES,
        **{stage: MappingProxyType(opts[stage]) for stage in STAGES},
    )
