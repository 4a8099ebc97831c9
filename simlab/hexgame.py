"""Catch-the-cat: a cat tries to escape a hexagonal board while a catcher blocks cells."""

from __future__ import annotations

import math
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point:
    """A cell on the board; (0, 0) is the centre, rows alternate their offset."""

    x: int
    y: int


def _odd_row(p: Point) -> bool:
    return p.y % 2 != 0


def east(p: Point) -> Point:
    return Point(p.x + 1, p.y)


def west(p: Point) -> Point:
    return Point(p.x - 1, p.y)


def north_east(p: Point) -> Point:
    if _odd_row(p):
        return Point(p.x + 1, p.y - 1)
    return Point(p.x, p.y - 1)


def north_west(p: Point) -> Point:
    if _odd_row(p):
        return Point(p.x, p.y - 1)
    return Point(p.x - 1, p.y - 1)


def south_east(p: Point) -> Point:
    if _odd_row(p):
        return Point(p.x, p.y + 1)
    return Point(p.x - 1, p.y + 1)


def south_west(p: Point) -> Point:
    if _odd_row(p):
        return Point(p.x + 1, p.y + 1)
    return Point(p.x, p.y + 1)


def neighbors(p: Point) -> list[Point]:
    """The six cells around ``p``: NE, NW, E, W, SW, SE."""
    return [north_east(p), north_west(p), east(p), west(p), south_west(p), south_east(p)]


def is_neighbor(p1: Point, p2: Point) -> bool:
    return p2 in neighbors(p1)


class Agent(ABC):
    """A player that picks a move given the current world."""

    @abstractmethod
    def move(self, world: World) -> Point:
        """Return the cell this agent wants to act on."""


class Cat(Agent):
    """Moves to a uniformly random neighbouring cell."""

    _DIRECTIONS = (north_east, north_west, east, west, south_west, south_east)

    def move(self, world: World) -> Point:
        direction = self._DIRECTIONS[world.rng.randint(0, 5)]
        return direction(world.cat_position)


class Catcher(Agent):
    """Blocks a random empty cell sharing neither row nor column with the cat."""

    def move(self, world: World) -> Point:
        side = world.side_size // 2
        cat = world.cat_position
        while True:
            p = Point(world.rng.randint(-side, side), world.rng.randint(-side, side))
            if cat.x != p.x and cat.y != p.y and not world.content(p):
                return p


class World:
    """Board state and turn logic of the game."""

    def __init__(self, side_size: int = 11, rng: random.Random | None = None) -> None:
        if side_size % 2 == 0:
            raise ValueError("side size must be odd")
        self.rng = rng if rng is not None else random.Random()
        self.side_size = side_size
        self.cat: Agent = Cat()
        self.catcher: Agent = Catcher()
        self.time_between_ai_ticks = 1.0
        self.move_duration = 0
        self.state: list[bool] = []
        self.clear()

    @classmethod
    def from_state(
        cls,
        side_size: int,
        cat_turn: bool,
        cat_position: Point,
        state: Iterable[bool],
        rng: random.Random | None = None,
    ) -> World:
        """Build a world from an explicit board, row by row from the top left."""
        cells = [bool(c) for c in state]
        if len(cells) != side_size * side_size:
            raise ValueError("state must hold side_size * side_size cells")
        world = cls.__new__(cls)
        world.rng = rng if rng is not None else random.Random()
        world.side_size = side_size
        world.cat = Cat()
        world.catcher = Catcher()
        world.time_between_ai_ticks = 1.0
        world.time_for_next_tick = 1.0
        world.move_duration = 0
        world.state = cells
        world.cat_position = cat_position
        world.cat_turn = cat_turn
        world.is_simulating = False
        world.cat_won = False
        world.catcher_won = False
        return world

    def clear(self) -> None:
        """Reset the board with a few random blocked cells and the cat at the centre."""
        total = self.side_size * self.side_size
        self.state = [False] * total
        for _ in range(math.ceil(total * 0.05)):
            self.state[self.rng.randint(0, total - 1)] = True
        self.cat_position = Point(0, 0)
        self.state[total // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def _index(self, p: Point) -> int:
        half = self.side_size // 2
        return (p.y + half) * self.side_size + p.x + half

    def content(self, p: Point) -> bool:
        """True when the cell is blocked."""
        if not self.is_valid_position(p):
            raise IndexError(f"{p} is outside the board")
        return self.state[self._index(p)]

    def is_valid_position(self, p: Point) -> bool:
        half = self.side_size // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def render(self) -> str:
        """Text picture of the board: C for the cat, # blocked, . empty."""
        cat_index = self._index(self.cat_position)
        parts: list[str] = []
        side = self.side_size
        for i, blocked in enumerate(self.state, start=1):
            parts.append("C" if i - 1 == cat_index else ("#" if blocked else "."))
            if (i + side) % (2 * side) == 0:
                parts.append("\n ")
            elif i % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self.cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(
            self.is_valid_position(n) and self.content(n)
            for n in neighbors(self.cat_position)
        )

    def step(self) -> None:
        """Play one turn; after a finished game, start a new one instead."""
        if self.cat_won or self.catcher_won:
            self.clear()
            return

        start = time.perf_counter_ns()
        if self.cat_turn:
            move = self.cat.move(self)
            if self.cat_can_move_to(move):
                self.cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self.catcher.move(self)
            if self.catcher_can_move_to(move):
                self.state[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the turn timer while simulating, stepping when it runs out."""
        if self.is_simulating:
            self.time_for_next_tick -= delta_time
            if self.time_for_next_tick < 0:
                self.step()
                self.time_for_next_tick = self.time_between_ai_ticks

    def cat_can_move_to(self, p: Point) -> bool:
        return (
            is_neighbor(self.cat_position, p)
            and self.is_valid_position(p)
            and not self.content(p)
        )

    def catcher_can_move_to(self, p: Point) -> bool:
        half = self.side_size // 2
        return p != self.cat_position and abs(p.x) <= half and abs(p.y) <= half

    def cat_wins_on_space(self, p: Point) -> bool:
        half = self.side_size // 2
        return abs(p.x) == half or abs(p.y) == half