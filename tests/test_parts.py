"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations

import pytest

from aoc_runner.errors import InvalidPartError, InvalidPartTypeError
from aoc_runner.parts import Part


@pytest.mark.parametrize(("raw", "expected"), [("1", Part.ONE), ("2", Part.TWO), ("+2", Part.TWO)])
def test_parse_valid(raw: str, expected: Part) -> None:
    assert Part.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "ss", "true", "1.0", " 1", "1_0", "٢", "1" * 5000])
def test_parse_not_an_int(raw: str) -> None:
    with pytest.raises(InvalidPartTypeError, match="invalid part type. The part type allowed is int"):
        Part.parse(raw)


@pytest.mark.parametrize("raw", ["0", "3", "-1", "22"])
def test_parse_out_of_range(raw: str) -> None:
    with pytest.raises(InvalidPartError) as exc_info:
        Part.parse(raw)

    assert exc_info.value.part == int(raw)
    assert str(exc_info.value) == f"invalid part: {int(raw)}. The valid parts are (1/2)"


def test_from_int() -> None:
    assert Part.from_int(1) is Part.ONE
    with pytest.raises(InvalidPartError):
        Part.from_int(5)
