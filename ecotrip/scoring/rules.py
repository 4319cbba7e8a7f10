"""Additive scoring skeleton: base score, named adjustment rules, clamp."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

S = TypeVar("S")

Band = tuple[Callable[[float], bool], int]


@dataclass(frozen=True)
class AdjustmentRule(Generic[S]):
    """One signal's contribution; returns 0 when the rule does not apply."""

    name: str
    adjust: Callable[[S], int]


@dataclass(frozen=True)
class ScoreTrace:
    base: int
    raw: int
    score: int
    adjustments: dict[str, int]


def banded(
    name: str,
    getter: Callable[[S], Optional[float]],
    bands: Sequence[Band],
) -> AdjustmentRule[S]:
    """First matching band wins; a missing value contributes nothing."""

    def adjust(signals: S) -> int:
        value = getter(signals)
        if value is None:
            return 0
        for matches, delta in bands:
            if matches(value):
                return delta
        return 0

    return AdjustmentRule(name=name, adjust=adjust)


def flag(name: str, getter: Callable[[S], bool], delta: int) -> AdjustmentRule[S]:
    return AdjustmentRule(name=name, adjust=lambda signals: delta if getter(signals) else 0)


class AdditiveScorer(Generic[S]):
    def __init__(
        self,
        *,
        base: int,
        rules: Sequence[AdjustmentRule[S]],
        floor: int,
        ceiling: int,
    ) -> None:
        names = [rule.name for rule in rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate scoring rules: {', '.join(duplicates)}")
        if floor > ceiling:
            raise ValueError(f"floor {floor} is above ceiling {ceiling}")
        self.base = base
        self.floor = floor
        self.ceiling = ceiling
        self._rules = tuple(rules)

    @property
    def rule_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def explain(self, signals: S) -> ScoreTrace:
        adjustments: dict[str, int] = {}
        for rule in self._rules:
            delta = rule.adjust(signals)
            if delta:
                adjustments[rule.name] = delta
        raw = self.base + sum(adjustments.values())
        return ScoreTrace(
            base=self.base,
            raw=raw,
            score=max(self.floor, min(self.ceiling, raw)),
            adjustments=adjustments,
        )

    def score(self, signals: S) -> int:
        return self.explain(signals).score


__all__ = ["AdditiveScorer", "AdjustmentRule", "Band", "ScoreTrace", "banded", "flag"]
