from __future__ import annotations

from typing import Iterable, Optional, Sequence

from lostdoctor.domain.models.script import Rule, RuleContext


class RuleTable:
    """Ordered rules evaluated first-match-wins.

    Order is the only precedence: a rule listed earlier shadows any later
    rule covering the same coordinate and state.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)
        names = [rule.name for rule in self._rules]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate rule names: {', '.join(duplicates)}")

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def rules(self) -> Sequence[Rule]:
        return self._rules

    def first_match(self, ctx: RuleContext) -> Optional[Rule]:
        for rule in self._rules:
            if rule.matches(ctx):
                return rule
        return None
