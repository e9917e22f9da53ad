"""Domain service: Sales Aggregation.

Builds a report by scanning sales records for one period and rolling
every line item up per product.

Rows are keyed on the *product name* captured on each invoice line,
not on the product id.  A product renamed mid-period therefore shows
up as two rows, one per name.  That is how reports have always been
grouped and it is kept as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

from pos.domain.model.invoice import SalesRecord
from pos.domain.model.report import DateFilter, ReportLine, SalesReport
from pos.domain.model.value_objects import Money


class SalesAggregator:

    def aggregate(
        self,
        sales: Iterable[SalesRecord],
        date_filter: DateFilter,
    ) -> SalesReport:
        """Sum quantity and revenue per product name for ``date_filter``.

        An empty or non-matching sales list yields an empty report with
        zero revenue rather than an error.
        """
        quantities: dict[str, int] = {}
        revenues: dict[str, Money] = {}

        for record in sales:
            if not date_filter.matches(record.date):
                continue
            for item in record.items:
                key = item.product_name
                # dicts keep insertion order, which gives first-seen rows
                quantities[key] = quantities.get(key, 0) + item.quantity.value
                revenues[key] = revenues.get(key, Money.zero()) + item.line_total

        lines = tuple(
            ReportLine(product_name=name, quantity=qty, revenue=revenues[name])
            for name, qty in quantities.items()
        )
        return SalesReport(period=date_filter, lines=lines)
