"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable

from .errors import InvalidPartError, InvalidPartTypeError

#: A single puzzle variant, raw input in, answer out.
Challenge = Callable[[str], int]

# int() alone would also take whitespace, underscores and non-ascii digits
_BASE10_INT = re.compile(r"[+-]?[0-9]+")


class Part(enum.IntEnum):
    ONE = 1
    TWO = 2

    @classmethod
    def from_int(cls: type[Part], value: int, /) -> Part:
        try:
            return cls(value)
        except ValueError:
            raise InvalidPartError(value) from None

    @classmethod
    def parse(cls: type[Part], raw: str, /) -> Part:
        """Validate a raw part as read from a flag, the environment, or a prompt."""
        if _BASE10_INT.fullmatch(raw) is None:
            raise InvalidPartTypeError
        try:
            value = int(raw)
        except ValueError:
            # past the interpreter's digit limit
            raise InvalidPartTypeError from None
        return cls.from_int(value)
