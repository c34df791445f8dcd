import threading

from payment_ledger.payment.domain.entity import Payment
from payment_ledger.payment.domain.enum import PaymentStatus
from payment_ledger.payment.domain.repository import PaymentRepository
from payment_ledger.payment.domain.service import (
    average_amount,
    filter_by_status,
    sort_by_amount_descending,
    success_amounts,
    total_amount,
)
from payment_ledger.shared.domain.exception import InvalidArgumentException
from payment_ledger.shared.utils import get_logger

logger = get_logger()


class InMemoryPaymentStore(PaymentRepository):
    """メモリ上に決済を保持する PaymentRepository の具象実装

    - 追加とスナップショットのコピーだけを単一のロックで排他する
    - 絞り込み・集計・並び替えはロックの外でスナップショットに対して行う
    - 削除操作は持たない
    """

    def __init__(self) -> None:
        self._payments: list[Payment] = []
        self._lock = threading.Lock()

    def add(self, payment: Payment) -> None:
        """決済を末尾に追加する"""
        if not isinstance(payment, Payment):
            logger.warning(
                "Rejected payment", extra={"argument_type": type(payment).__name__}
            )
            raise InvalidArgumentException("Payment must not be None")

        with self._lock:
            self._payments.append(payment)
            count = len(self._payments)

        logger.debug("Payment added", extra={"payment_id": payment.id, "count": count})

    def all(self) -> tuple[Payment, ...]:
        """追加順のスナップショットを返す"""
        with self._lock:
            return tuple(self._payments)

    def by_status(self, status: PaymentStatus) -> tuple[Payment, ...]:
        """スナップショットのうち、現時点で status に一致する決済を返す"""
        target = PaymentStatus.from_value(status)
        return filter_by_status(self.all(), target)

    def count(self) -> int:
        return len(self.all())

    def total_success_amount(self) -> float:
        return total_amount(success_amounts(self.all()))

    def average_success_amount(self) -> float:
        return average_amount(success_amounts(self.all()))

    def sorted_by_amount_descending(self) -> tuple[Payment, ...]:
        return sort_by_amount_descending(self.all())

    def __len__(self) -> int:
        return self.count()
