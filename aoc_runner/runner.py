"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, assert_never

from .console import ConsoleManager, SupportsWrite
from .errors import RunnerError
from .parts import Challenge, Part

log = logging.getLogger("aoc_runner")


class IOManager(Protocol):
    def read(self, arg: str, /) -> str:
        """Return the raw value configured for ``arg``, or an empty string."""
        ...

    def write(self, result: str, /) -> None:
        """Report a result, raising if the primary sink refuses it."""
        ...


def setup_logging(output: SupportsWrite[str]) -> None:
    handler = logging.StreamHandler(output)
    formatter = logging.Formatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S", style="%")
    handler.setFormatter(formatter)
    log.addHandler(handler)
    log.setLevel(logging.INFO)


def resolve_part(manager: IOManager, part: int = 0) -> Part:
    if part:
        return Part.from_int(part)

    raw = manager.read("part")
    return Part.parse(raw)


def execute_challenge(input: str, part_one: Challenge, part_two: Challenge, part: Part) -> int:
    log.debug("Running part %d", part)
    if part == Part.ONE:
        return part_one(input)
    elif part == Part.TWO:
        return part_two(input)
    else:
        assert_never(part)


def run(
    input: str,
    part_one: Challenge,
    part_two: Challenge,
    *,
    manager: IOManager | None = None,
    part: int = 0,
) -> int:
    """
    Run one part of a challenge against ``input`` and report the answer.

    ``manager`` replaces the console (flags, environment, prompt, clipboard)
    as the place the part is read from and the result is written to.
    A non-zero ``part`` skips reading entirely.
    """
    if manager is None:
        manager = ConsoleManager()

    selected = resolve_part(manager, part)
    result = execute_challenge(input, part_one, part_two, selected)
    manager.write(str(result))
    return result


def run_or_exit(
    input: str,
    part_one: Challenge,
    part_two: Challenge,
    *,
    manager: IOManager | None = None,
    part: int = 0,
) -> int:
    if not log.handlers:
        setup_logging(sys.stderr)
    try:
        return run(input, part_one, part_two, manager=manager, part=part)
    except RunnerError as exc:
        log.error("error running challenge: %s", exc)
        sys.exit(1)
