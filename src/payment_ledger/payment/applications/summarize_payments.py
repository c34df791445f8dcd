from collections import Counter

from payment_ledger.payment.applications.summary_models import (
    PaymentData,
    PaymentSummary,
)
from payment_ledger.payment.domain.enum import PaymentStatus
from payment_ledger.payment.domain.repository import PaymentRepository
from payment_ledger.payment.domain.service import average_amount, total_amount


class SummarizePaymentsService:
    """決済集計ユースケース

    1つのスナップショットから各ステータスを一度だけ読み、
    すべての数値を同じ観測結果から算出する。
    """

    def __init__(self, repository: PaymentRepository) -> None:
        self._repository = repository

    def summarize(self) -> PaymentSummary:
        snapshot = self._repository.all()
        observed = [(payment, payment.status) for payment in snapshot]

        amounts = [p.amount for p, status in observed if status == PaymentStatus.SUCCESS]
        counts = Counter(status for _, status in observed)

        return PaymentSummary(
            total_count=len(observed),
            success_total_amount=total_amount(amounts),
            success_average_amount=average_amount(amounts),
            count_by_status={status: counts.get(status, 0) for status in PaymentStatus},
            payments=[PaymentData.from_entity(p, status) for p, status in observed],
        )
