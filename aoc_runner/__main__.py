"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from .runner import run_or_exit


def part_one(input: str) -> int:
    return len(input)


def part_two(input: str) -> int:
    return len(input) * 2


if __name__ == "__main__":
    run_or_exit("input", part_one, part_two)
