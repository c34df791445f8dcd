from typing import NotRequired, TypedDict

from payment_ledger.payment.domain.entity.payment import Payment
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus


class PaymentDetails(TypedDict):
    """決済の入力データ構造（TypedDict）"""

    payment_id: str
    amount: float | int | str
    currency: str
    status: NotRequired[PaymentStatus | str]


class PaymentFactory:
    """決済ファクトリ"""

    def create(self, payment_details: PaymentDetails) -> Payment:
        """入力データから決済エンティティを生成する

        status が省略された場合は PENDING とする。
        """
        return Payment(
            id=payment_details["payment_id"],
            amount=float(payment_details["amount"]),
            currency=payment_details["currency"],
            status=PaymentStatus.from_value(
                payment_details.get("status", PaymentStatus.PENDING)
            ),
        )
