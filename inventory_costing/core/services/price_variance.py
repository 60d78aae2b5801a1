"""Ordered vs. received price variance analysis."""

from collections.abc import Sequence
from dataclasses import dataclass

from inventory_costing.core.entities.inventory import PriceVarianceReport, VarianceImpact
from inventory_costing.core.entities.purchasing import ReceivedItem


@dataclass
class ReceiptTotals:
    """Money totals of a receipt."""

    total_ordered_amount: float
    total_received_amount: float

    @property
    def total_variance(self) -> float:
        return self.total_received_amount - self.total_ordered_amount


class PriceVarianceAnalyzer:
    """
    Classifies unit price differences between the order and the delivery.

    A price increase is a NEGATIVE impact for the buyer and a decrease is
    POSITIVE. Percentages are 0 when no price was quoted.
    """

    def analyze(self, items: Sequence[ReceivedItem]) -> list[PriceVarianceReport]:
        return [self._report(item) for item in items]

    def summarize(self, items: Sequence[ReceivedItem]) -> ReceiptTotals:
        return ReceiptTotals(
            total_ordered_amount=sum(item.ordered_amount for item in items),
            total_received_amount=sum(item.received_amount for item in items),
        )

    @staticmethod
    def _report(item: ReceivedItem) -> PriceVarianceReport:
        variance = item.received_unit_price - item.ordered_unit_price
        if item.ordered_unit_price > 0:
            variance_percentage = variance / item.ordered_unit_price * 100
        else:
            variance_percentage = 0.0

        if variance > 0:
            impact = VarianceImpact.NEGATIVE
        elif variance < 0:
            impact = VarianceImpact.POSITIVE
        else:
            impact = VarianceImpact.NEUTRAL

        return PriceVarianceReport(
            product_id=item.product_id,
            product_name=item.product_name,
            ordered_price=item.ordered_unit_price,
            received_price=item.received_unit_price,
            variance=variance,
            variance_percentage=variance_percentage,
            impact=impact,
        )
