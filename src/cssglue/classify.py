# classify.py
from __future__ import annotations

import os
from typing import Dict, List

from .errors import UnsupportedSourceKind
from .model import Stage

# case-sensitive: ".CSS" is not a stylesheet
EXTENSION_STAGES: Dict[str, Stage] = {
    ".css": Stage.PASS_THROUGH,
    ".less": Stage.LESS,
    ".sass": Stage.SASS,
    ".scss": Stage.SASS,
}

SUPPORTED_EXTENSIONS: List[str] = list(EXTENSION_STAGES)


def classify(path: str) -> Stage:
    """Map a source path to the stage that has to process it."""
    ext = os.path.splitext(path)[1]
    try:
        return EXTENSION_STAGES[ext]
    except KeyError:
        raise UnsupportedSourceKind(path=path, supported=SUPPORTED_EXTENSIONS) from None
