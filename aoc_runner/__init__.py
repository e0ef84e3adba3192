"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

# Note: This is Year, month, monotonic not year, month, day
__version__ = "2024.12.1"

from .console import ConsoleManager, Env, Settings
from .errors import (
    FlagParseError,
    InputReadError,
    InvalidPartError,
    InvalidPartTypeError,
    MissingPartError,
    OutputWriteError,
    RunnerError,
)
from .parts import Challenge, Part
from .runner import IOManager, execute_challenge, resolve_part, run, run_or_exit, setup_logging

__all__ = [
    "Challenge",
    "ConsoleManager",
    "Env",
    "FlagParseError",
    "IOManager",
    "InputReadError",
    "InvalidPartError",
    "InvalidPartTypeError",
    "MissingPartError",
    "OutputWriteError",
    "Part",
    "RunnerError",
    "Settings",
    "execute_challenge",
    "resolve_part",
    "run",
    "run_or_exit",
    "setup_logging",
]
