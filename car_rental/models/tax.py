"""Age-bracket tax rules applied to the daily rate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator, Optional, Tuple

from car_rental.exceptions import InvalidTaxTableError, NoMatchingTaxRuleError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaxRule:
    """
    Inclusive age range [from_age, to_age] mapped to a price multiplier.
    """
    from_age: int
    to_age: int
    multiplier: Decimal

    def matches(self, age: int) -> bool:
        return self.from_age <= age <= self.to_age

    def overlaps(self, other: "TaxRule") -> bool:
        """Inclusive ranges overlap iff each one starts before the other ends."""
        return self.from_age <= other.to_age and other.from_age <= self.to_age


class TaxTable:
    """
    Ordered, read-only collection of tax rules.

    Rules are validated once at construction: every range must be well formed,
    every multiplier positive, and no two ranges may overlap. Lookup still walks
    the rules in their given order and returns the first match, so a table
    built with ``allow_overlap=True`` resolves ties by position.
    """

    def __init__(self, rules: Iterable[TaxRule], allow_overlap: bool = False):
        self._rules: Tuple[TaxRule, ...] = tuple(rules)
        self._validate(allow_overlap)

    def _validate(self, allow_overlap: bool) -> None:
        for rule in self._rules:
            if rule.from_age > rule.to_age:
                raise InvalidTaxTableError(
                    f"Error: tax rule range {rule.from_age}-{rule.to_age} is reversed"
                )
            if rule.multiplier <= 0:
                raise InvalidTaxTableError(
                    f"Error: tax rule {rule.from_age}-{rule.to_age} has a non-positive multiplier"
                )
        if allow_overlap:
            return
        for i, a in enumerate(self._rules):
            for b in self._rules[i + 1:]:
                if a.overlaps(b):
                    raise InvalidTaxTableError(
                        f"Error: tax rules {a.from_age}-{a.to_age} and "
                        f"{b.from_age}-{b.to_age} overlap"
                    )

    def __iter__(self) -> Iterator[TaxRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def find(self, age: int) -> Optional[TaxRule]:
        """Return the first rule covering ``age``, or None."""
        return next((r for r in self._rules if r.matches(age)), None)

    def multiplier_for(self, age: int) -> Decimal:
        """Multiplier for ``age``; raise NoMatchingTaxRuleError when no bracket covers it."""
        rule = self.find(age)
        if rule is None:
            logger.warning("No tax rule covers age %s", age)
            raise NoMatchingTaxRuleError(age=age)
        logger.debug("Tax rule %s-%s (x%s) applied to age %s",
                     rule.from_age, rule.to_age, rule.multiplier, age)
        return rule.multiplier

    @classmethod
    def from_dicts(cls, items: Iterable[dict], allow_overlap: bool = False) -> "TaxTable":
        """
        Build a table from plain records. Accepts both ``multiplier`` and the
        legacy ``then`` key for the factor.
        """
        rules = []
        for d in items:
            factor = d.get("multiplier", d.get("then"))
            if factor is None:
                raise InvalidTaxTableError(f"Error: tax rule {d!r} has no multiplier")
            rules.append(TaxRule(
                from_age=int(d["from"]),
                to_age=int(d["to"]),
                multiplier=Decimal(str(factor)),
            ))
        return cls(rules, allow_overlap=allow_overlap)


DEFAULT_TAX_RULES = (
    TaxRule(18, 25, Decimal("1.1")),
    TaxRule(26, 30, Decimal("1.5")),
    TaxRule(31, 100, Decimal("1.3")),
)


def default_tax_table() -> TaxTable:
    return TaxTable(DEFAULT_TAX_RULES)
