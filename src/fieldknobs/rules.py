"""Ordered, short-circuiting rule evaluation.

A validator turns its options into a list of ``Rule`` objects and hands them
to ``evaluate_rules``. Rules are checked in list order and evaluation stops
at the first one whose condition holds; nothing after it runs, so a custom
callback placed late in the list is never invoked for input that already
failed an earlier rule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A single pipeline step.

    Attributes:
        name: Identifier of the rule, e.g. ``"min_length"``
        condition: Zero-argument callable returning True when the rule is violated
        message: Error message reported if this is the first violated rule
    """

    name: str
    condition: Callable[[], bool]
    message: str

    def is_violated(self) -> bool:
        return bool(self.condition())


def evaluate_rules(rules: Iterable[Rule]) -> Rule | None:
    """Return the first violated rule, or None if every rule passes.

    Args:
        rules: Rules in evaluation order

    Returns:
        The first rule whose condition holds, else None
    """
    for rule in rules:
        if rule.is_violated():
            logger.debug(f"Rule '{rule.name}' failed: {rule.message}")
            return rule
    return None
