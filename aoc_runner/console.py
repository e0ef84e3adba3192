"""
This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at http://mozilla.org/MPL/2.0/.

Copyright (C) 2023 Michael Hall <https://github.com/mikeshardmind>
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NoReturn, Protocol, TypeVar

import msgspec
import pyperclip

from .errors import FlagParseError, InputReadError, MissingPartError, OutputWriteError

log = logging.getLogger("aoc_runner")

T_contra = TypeVar("T_contra", contravariant=True)

PROMPT = "Which part do you want to run? (1/2)\n"


class SupportsWrite(Protocol[T_contra]):
    def write(self, s: T_contra, /) -> object: ...


class SupportsReadline(Protocol):
    def readline(self) -> str: ...


@dataclass(frozen=True, kw_only=True)
class Env:
    """Everything the console manager is allowed to touch, captured up front."""

    stdin: SupportsReadline
    stdout: SupportsWrite[str]
    #: argv without the program name
    args: Sequence[str] = ()
    environ: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_process(cls: type[Env]) -> Env:
        return cls(stdin=sys.stdin, stdout=sys.stdout, args=tuple(sys.argv[1:]), environ=os.environ)


class Settings(msgspec.Struct, frozen=True, rename="upper"):
    challenge_part: str = ""
    disable_copy_clipboard: str = ""

    @classmethod
    def from_environ(cls: type[Settings], environ: Mapping[str, str], /) -> Settings:
        return msgspec.convert(dict(environ), type=cls)

    @property
    def copy_to_clipboard(self) -> bool:
        return self.disable_copy_clipboard != "true"


class _FlagParser(argparse.ArgumentParser):
    def __init__(self, output: SupportsWrite[str], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.output = output

    def error(self, message: str) -> NoReturn:
        with contextlib.suppress(OSError, ValueError):
            self.output.write(self.format_help())
        raise FlagParseError(message)


def _make_flag_parser(output: SupportsWrite[str]) -> _FlagParser:
    parser = _FlagParser(output, prog="aoc_runner", add_help=False, allow_abbrev=False)
    parser.add_argument("--part", "-part", dest="part", type=str, default="", help="Part of the challenge (1/2)")
    return parser


@dataclass(kw_only=True)
class ConsoleManager:
    env: Env = field(default_factory=Env.from_process)
    #: raw part taking priority over every console source
    part: str = ""

    @property
    def settings(self) -> Settings:
        return Settings.from_environ(self.env.environ)

    def read(self, arg: str) -> str:
        """
        Resolve a raw value for ``arg``; only ``"part"`` is known.

        Sources are tried in order and the first non-empty value wins.
        A malformed command line stops the search instead of falling through.
        """
        if arg != "part":
            return ""

        sources: tuple[tuple[str, Callable[[], str]], ...] = (
            ("override", lambda: self.part),
            ("command line", self._part_from_flag),
            ("environment", self._part_from_environ),
            ("prompt", self._part_from_prompt),
        )

        for name, source in sources:
            if part := source():
                log.debug("Using part %r from %s", part, name)
                return part

        raise MissingPartError

    def write(self, result: str) -> None:
        try:
            self.env.stdout.write(f"The challenge result is {result}\n")
        except (OSError, ValueError) as exc:
            raise OutputWriteError(exc) from exc

        if self.settings.copy_to_clipboard:
            self._to_clipboard(result)

    def _part_from_flag(self) -> str:
        parser = _make_flag_parser(self.env.stdout)
        ns, rest = parser.parse_known_args(list(self.env.args))
        # positional leftovers belong to the caller, unknown flags do not
        if unknown := [arg for arg in rest if arg.startswith("-")]:
            parser.error(f"unrecognized arguments: {' '.join(unknown)}")
        return ns.part

    def _part_from_environ(self) -> str:
        return self.settings.challenge_part

    def _part_from_prompt(self) -> str:
        try:
            self.env.stdout.write(PROMPT)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(exc) from exc

        try:
            line = self.env.stdin.readline()
        except (OSError, ValueError) as exc:
            raise InputReadError(exc) from exc

        # EOF and blank lines both count as no answer
        token, *_ = line.split() or [""]
        return token

    def _to_clipboard(self, value: str) -> None:
        try:
            pyperclip.copy(value)
        except pyperclip.PyperclipException as exc:
            status = f"Error copying to clipboard: {exc}\n"
        else:
            status = f"Copied to clipboard: {value}\n"

        with contextlib.suppress(OSError, ValueError):
            self.env.stdout.write(status)
