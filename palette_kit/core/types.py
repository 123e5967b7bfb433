"""Shared types for palette-tool: PaletteState, ContrastResult, Context, Command."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np


@dataclass(frozen=True)
class PaletteState:
    """Everything the CLI remembers between invocations."""

    scheme: str
    base_hue: int
    palette: list[str]
    locks: list[bool]
    angle: int = 45  # gradient preview angle, degrees
    fg_index: int = 1  # 1-based contrast foreground slot
    bg_index: int = 5  # 1-based contrast background slot

    def to_snapshot(self) -> dict[str, Any]:
        """Flat key-value snapshot, keyed the way the store persists it."""
        return {
            'scheme': self.scheme,
            'baseHue': self.base_hue,
            'palette': list(self.palette),
            'locks': list(self.locks),
            'angle': self.angle,
            'fg': self.fg_index,
            'bg': self.bg_index,
        }


@dataclass(frozen=True)
class ContrastResult:
    """Contrast between two palette slots."""

    fg_index: int
    bg_index: int
    fg: str
    bg: str
    ratio: float
    level: str  # 'AAA', 'AA', 'AA Large' or 'Fail'

    def to_dict(self) -> dict[str, Any]:
        return {
            'fg': self.fg_index,
            'bg': self.bg_index,
            'fg_hex': self.fg,
            'bg_hex': self.bg,
            'ratio': round(self.ratio, 2),
            'level': self.level,
        }


@dataclass
class Context:
    """Per-invocation collaborators handed to every command."""

    rng: np.random.Generator
    out_dir: str = '.'
    messages: list[str] = field(default_factory=list)  # stderr notes, printed by main
    printed: bool = False  # command wrote its own stdout output

    def note(self, message: str) -> None:
        self.messages.append(message)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='lock', help='Lock palette slots')

        @command.options
        def options(parser):
            parser.add_argument('slots', nargs='+', type=int)

        @command.run
        def run(state, args, ctx):
            return state
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._options_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def options(self, fn: Callable) -> Callable:
        """Decorator to register the function adding subcommand arguments."""
        self._options_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._options_fn is not None:
            self._options_fn(parser)

    def execute(self, state: PaletteState, args: Any, ctx: Context) -> PaletteState:
        """Execute the command's run function and return the new state."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(state, args, ctx)
