from __future__ import annotations

import pytest

from cssglue.classify import SUPPORTED_EXTENSIONS, classify
from cssglue.errors import UnsupportedSourceKind
from cssglue.model import Stage


@pytest.mark.parametrize(
    ("path", "stage"),
    [
        ("a.css", Stage.PASS_THROUGH),
        ("styles/b.less", Stage.LESS),
        ("c.sass", Stage.SASS),
        ("/abs/d.scss", Stage.SASS),
        ("vendor.min.css", Stage.PASS_THROUGH),
    ],
)
def test_classify_supported_extensions(path: str, stage: Stage) -> None:
    assert classify(path) is stage


@pytest.mark.parametrize("path", ["style.txt", "a.CSS", "Makefile", "b.less.bak"])
def test_classify_rejects_other_extensions(path: str) -> None:
    with pytest.raises(UnsupportedSourceKind) as exc:
        classify(path)

    assert exc.value.path == path
    assert exc.value.supported == [".css", ".less", ".sass", ".scss"]
    assert path in str(exc.value)
    assert '".scss"' in str(exc.value)


def test_supported_extensions_order() -> None:
    assert SUPPORTED_EXTENSIONS == [".css", ".less", ".sass", ".scss"]
