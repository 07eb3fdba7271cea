from __future__ import annotations

import re

import pytest

from cssglue.naming import (
    RandomSuffix,
    SequenceSuffix,
    TargetNamer,
    make_unique_target,
    random_hash,
)

UNIQUE_RE = re.compile(r"^build_[0-9a-f]{6}$")


def test_make_unique_target_shape() -> None:
    for _ in range(200):
        assert UNIQUE_RE.match(make_unique_target("build"))


def test_make_unique_target_explicit_suffix() -> None:
    assert make_unique_target("app", "00000a") == "app_00000a"


def test_random_hash_length_and_alphabet() -> None:
    value = random_hash(12)
    assert len(value) == 12
    assert set(value) <= set("0123456789abcdef")


def test_sequence_suffix_is_monotonic_hex() -> None:
    seq = SequenceSuffix()
    assert [seq() for _ in range(3)] == ["000000", "000001", "000002"]

    seq = SequenceSuffix(start=255)
    assert seq() == "0000ff"


def test_sequence_suffix_overflow() -> None:
    seq = SequenceSuffix(start=16 ** 6 - 1)
    assert seq() == "ffffff"
    with pytest.raises(OverflowError):
        seq()


def test_target_namer_defaults_to_sequence() -> None:
    namer = TargetNamer()
    names = [namer("build") for _ in range(50)]

    assert names[0] == "build_000000"
    assert len(set(names)) == 50
    assert all(UNIQUE_RE.match(n) for n in names)


def test_target_namer_injectable_suffix() -> None:
    namer = TargetNamer(RandomSuffix())
    assert UNIQUE_RE.match(namer("build"))

    namer = TargetNamer(lambda: "abcdef")
    assert namer("x") == "x_abcdef"
