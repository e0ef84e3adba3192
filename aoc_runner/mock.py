"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations

import io
from collections.abc import Mapping, Sequence

from .console import Env


def buffer_env(args: Sequence[str] = (), stdin: str = "", environ: Mapping[str, str] | None = None) -> Env:
    return Env(
        stdin=io.StringIO(stdin),
        stdout=io.StringIO(),
        args=tuple(args),
        environ=dict(environ or {}),
    )


class BufferManager:
    """Stands in for the console: fixed part in, result lines collected in memory."""

    def __init__(
        self,
        part: str,
        read_error: Exception | None = None,
        write_error: Exception | None = None,
    ) -> None:
        self.part = part
        self.read_error = read_error
        self.write_error = write_error
        self.reads: list[str] = []
        self._buffer = io.StringIO()

    def read(self, arg: str, /) -> str:
        self.reads.append(arg)
        if self.read_error is not None:
            raise self.read_error
        return self.part

    def write(self, result: str, /) -> None:
        if self.write_error is not None:
            raise self.write_error
        self._buffer.write(f"The challenge result is {result}\n")

    @property
    def stdout(self) -> str:
        return self._buffer.getvalue()
