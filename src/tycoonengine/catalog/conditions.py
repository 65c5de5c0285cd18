"""
Unlock-condition predicates.

Catalog entries gate their visibility with a tiny predicate language::

    always
    <reference_id> <op> <integer>        e.g. "deposit >= 1"

Conditions are parsed once when the catalog is built. Evaluation only needs
a callable that resolves a reference id to its current numeric value.
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

log = logging.getLogger(__name__)

ALWAYS_LITERAL = "always"

_CONDITION_RE = re.compile(r"^\s*(\S+)\s+(>=|>|==|<=|<)\s+([+-]?\d+)\s*$")


class Operator(Enum):
    """Comparison operators accepted in unlock conditions."""

    GE = ">="
    GT = ">"
    EQ = "=="
    LE = "<="
    LT = "<"

    def apply(self, lhs: float, rhs: float) -> bool:
        return _OPERATOR_FUNCS[self](lhs, rhs)


_OPERATOR_FUNCS: dict[Operator, Callable[[float, float], bool]] = {
    Operator.GE: operator.ge,
    Operator.GT: operator.gt,
    Operator.EQ: operator.eq,
    Operator.LE: operator.le,
    Operator.LT: operator.lt,
}


@dataclass(slots=True, frozen=True)
class Always:
    """Condition that is satisfied from the start."""

    def evaluate(self, resolve: Callable[[str], float]) -> bool:
        return True

    def __str__(self) -> str:
        return ALWAYS_LITERAL


@dataclass(slots=True, frozen=True)
class Never:
    """
    Condition that never holds.

    Produced for condition strings that cannot be parsed so that broken
    catalog entries stay locked instead of crashing the game.
    """

    source: str = ""

    def evaluate(self, resolve: Callable[[str], float]) -> bool:
        return False

    def __str__(self) -> str:
        return self.source


@dataclass(slots=True, frozen=True)
class Threshold:
    """``value_of(reference_id) <operator> threshold``."""

    reference_id: str
    operator: Operator
    threshold: int

    def evaluate(self, resolve: Callable[[str], float]) -> bool:
        return self.operator.apply(resolve(self.reference_id), self.threshold)

    def __str__(self) -> str:
        return f"{self.reference_id} {self.operator.value} {self.threshold}"


UnlockCondition = Union[Always, Never, Threshold]

ALWAYS = Always()


def parse_condition(text: str | None) -> UnlockCondition:
    """
    Parse an unlock-condition string.

    Parameters
    ----------
    text : str or None
        ``"always"``, an empty value (treated as ``"always"``), or
        ``"<reference_id> <op> <integer>"``.

    Returns
    -------
    UnlockCondition
        ``ALWAYS``, a :class:`Threshold`, or a :class:`Never` when the text
        is malformed. Malformed input is logged, never raised.
    """
    if text is None:
        return ALWAYS
    if not isinstance(text, str):
        log.warning("Unlock condition must be a string, got %r", text)
        return Never(repr(text))

    stripped = text.strip()
    if not stripped or stripped == ALWAYS_LITERAL:
        return ALWAYS

    match = _CONDITION_RE.match(stripped)
    if match is None:
        log.warning("Malformed unlock condition %r; item will stay locked", text)
        return Never(text)

    reference_id, op, threshold = match.groups()
    return Threshold(reference_id, Operator(op), int(threshold))
