"""Drills on lists, dictionaries and optional values."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def make_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and five pieces in all."""
    return {"banana": 2, "apple": 2, "mango": 2}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add six of every fruit the basket has none of; leave the others alone."""
    for fruit in Fruit:
        if basket.get(fruit, 0) == 0:
            basket[fruit] = 6


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int
    goals_conceded: int


_U8 = re.compile(r"\+?[0-9]+")


def _parse_goals(text: str) -> int:
    if not _U8.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > 255:
        raise OverflowError("goal total exceeds 255")
    return total


def _result_lines(text: str) -> list[str]:
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        lines.append(last)
    return lines


def build_scores_table(results: str) -> dict[str, Team]:
    """Build goals scored and conceded per team from "team1,team2,goals1,goals2" lines."""
    scores: dict[str, Team] = {}
    for line in _result_lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        score_1, score_2 = _parse_goals(fields[2]), _parse_goals(fields[3])
        for name, scored, conceded in ((team_1, score_1, score_2), (team_2, score_2, score_1)):
            team = scores.get(name)
            if team is None:
                scores[name] = Team(scored, conceded)
            else:
                team.goals_scored = _add_goals(team.goals_scored, scored)
                team.goals_conceded = _add_goals(team.goals_conceded, conceded)
    return scores


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left: 5 before 22:00, 0 up to 24, None for impossible hours."""
    if time_of_day < 0:
        raise ValueError("time_of_day cannot be negative")
    if time_of_day < 22:
        return 5
    if time_of_day <= 24:
        return 0
    return None