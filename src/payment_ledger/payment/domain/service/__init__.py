from .payment_statistics import (
    average_amount,
    filter_by_status,
    sort_by_amount_descending,
    success_amounts,
    total_amount,
)

__all__ = [
    "average_amount",
    "filter_by_status",
    "sort_by_amount_descending",
    "success_amounts",
    "total_amount",
]
