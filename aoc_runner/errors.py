"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations


class RunnerError(Exception):
    pass


class MissingPartError(RunnerError):
    def __init__(self) -> None:
        super().__init__("no part specified, please provide a valid part")


class InvalidPartTypeError(RunnerError):
    def __init__(self) -> None:
        super().__init__("invalid part type. The part type allowed is int")


class InvalidPartError(RunnerError):
    def __init__(self, part: int) -> None:
        self.part = part
        super().__init__(f"invalid part: {part}. The valid parts are (1/2)")


class InputReadError(RunnerError):
    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"failed to read input: {cause}")


class FlagParseError(InputReadError):
    pass


class OutputWriteError(RunnerError):
    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"failed to write output: {cause}")
