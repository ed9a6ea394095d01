"""Cafe: a building that sells coffee out of a four-item stock.

Stock is coffee (ounces), sugar packets, cream portions and cups. A sale
that the stock can't cover triggers a restock of exactly the shortfall
before the sale is taken out of stock, so every sale goes through.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, Field

from campus_directory.config import Config
from campus_directory.models.building import Building

logger = logging.getLogger(__name__)


class Restock(BaseModel):
    """Amounts actually added to stock by one restock."""

    coffee_ounces: int = 0
    sugar_packets: int = 0
    cream_portions: int = 0
    cups: int = 0


class Sale(BaseModel):
    """One coffee sold, and the restock it needed (if any)."""

    size: int
    sugar_packets: int
    cream_portions: int
    restock: Restock | None = None

    @property
    def restocked(self) -> bool:
        return self.restock is not None


class Cafe(Building):
    """A building that sells coffee and restocks itself when running low."""

    kind: ClassVar[str] = "cafe"

    coffee_ounces: int = Field(default=0, ge=0)
    sugar_packets: int = Field(default=0, ge=0)
    cream_portions: int = Field(default=0, ge=0)
    cups: int = Field(default=0, ge=0)
    log: logging.Logger = Field(
        default_factory=lambda: logger, exclude=True, repr=False
    )

    def _options(self) -> list[str]:
        return super()._options() + ["sell(size, sugar, cream)", "sell_default()"]

    def stock(self) -> tuple[int, int, int, int]:
        """(coffee ounces, sugar packets, cream portions, cups) on hand."""
        return (self.coffee_ounces, self.sugar_packets, self.cream_portions, self.cups)

    # ── Selling ───────────────────────────────────────────────────────

    def sell(self, size: int, sugar_packets: int, cream_portions: int) -> Sale:
        """Sell one coffee, restocking first if the stock can't cover it.

        The restock is computed from the stock before the sale, and the
        order is always taken out of stock afterwards.
        """
        coffee_short = self.coffee_ounces < size
        sugar_short = sugar_packets > self.sugar_packets
        cream_short = cream_portions > self.cream_portions
        cups_short = self.cups == 0

        restock = None
        if coffee_short or sugar_short or cream_short or cups_short:
            self.log.info("Not enough ingredients at %s. Restocking...", self.name)
            if cups_short and not (coffee_short or sugar_short or cream_short):
                restock = self._restock_cups(1 - self.cups)
            else:
                restock = self._restock(
                    size - self.coffee_ounces,
                    sugar_packets - self.sugar_packets,
                    cream_portions - self.cream_portions,
                    1 - self.cups,
                )

        self.coffee_ounces -= size
        self.sugar_packets -= sugar_packets
        self.cream_portions -= cream_portions
        self.cups -= 1

        self.log.info(
            "Sold a coffee with %d ounces, %d sugar packets, and %d cream.",
            size, sugar_packets, cream_portions,
        )
        return Sale(
            size=size,
            sugar_packets=sugar_packets,
            cream_portions=cream_portions,
            restock=restock,
        )

    def sell_default(self) -> Sale:
        """Sell the standard coffee (see Config.standard_order)."""
        return self.sell(*Config.standard_order())

    # ── Restocking ────────────────────────────────────────────────────

    def _restock(
        self, coffee_ounces: int, sugar_packets: int, cream_portions: int, cups: int
    ) -> Restock:
        """Add the positive amounts to stock; zero or negative ones are ignored."""
        added = Restock(
            coffee_ounces=max(coffee_ounces, 0),
            sugar_packets=max(sugar_packets, 0),
            cream_portions=max(cream_portions, 0),
            cups=max(cups, 0),
        )
        self.coffee_ounces += added.coffee_ounces
        self.sugar_packets += added.sugar_packets
        self.cream_portions += added.cream_portions
        self.cups += added.cups
        self.log.info(
            "Restocked: %d ounces of coffee, %d sugar packets, %d creams, and %d cups.",
            added.coffee_ounces, added.sugar_packets, added.cream_portions, added.cups,
        )
        return added

    def _restock_cups(self, cups: int) -> Restock:
        added = Restock(cups=max(cups, 0))
        self.cups += added.cups
        self.log.info("Restocked: %d cups.", added.cups)
        return added
