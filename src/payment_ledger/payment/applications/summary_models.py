from __future__ import annotations

from pydantic import BaseModel, Field

from payment_ledger.payment.domain.entity.payment import Payment
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    payment_id: str
    amount: float
    currency: str
    status: PaymentStatus

    @classmethod
    def from_entity(cls, payment: Payment, status: PaymentStatus) -> PaymentData:
        return cls(
            payment_id=payment.id,
            amount=payment.amount,
            currency=payment.currency,
            status=status,
        )


class PaymentSummary(BaseModel):
    """決済集計のレスポンスモデル"""

    total_count: int = Field(..., ge=0)
    success_total_amount: float
    success_average_amount: float
    count_by_status: dict[PaymentStatus, int]
    payments: list[PaymentData]


def to_response(summary: PaymentSummary) -> dict:
    """集計結果をレスポンス辞書に変換する

    金額は float のまま残すため、inf / nan もそのまま出力される。
    """
    return summary.model_dump()
