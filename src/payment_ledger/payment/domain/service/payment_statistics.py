"""スナップショットに対する絞り込み・集計・並び替え

どの関数も受け取ったシーケンスを変更せず、ロックも取らない。
"""

import math
from collections.abc import Iterable, Sequence

from payment_ledger.payment.domain.entity.payment import Payment
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus


def filter_by_status(
    payments: Iterable[Payment], status: PaymentStatus
) -> tuple[Payment, ...]:
    return tuple(p for p in payments if p.status == status)


def success_amounts(payments: Iterable[Payment]) -> list[float]:
    return [p.amount for p in payments if p.status == PaymentStatus.SUCCESS]


def total_amount(amounts: Sequence[float]) -> float:
    # 順に足すだけ（高精度の加算はしない）
    return sum(amounts, 0.0)


def average_amount(amounts: Sequence[float]) -> float:
    """平均金額。空なら 0.0"""
    if not amounts:
        return 0.0
    return total_amount(amounts) / len(amounts)


def _amount_order(amount: float) -> tuple[int, float, float]:
    """金額の全順序キー

    NaN は +inf より大きく、-0.0 は 0.0 より小さいものとして扱う。
    """
    if math.isnan(amount):
        return (1, 0.0, 0.0)
    return (0, amount, math.copysign(1.0, amount))


def sort_by_amount_descending(payments: Iterable[Payment]) -> tuple[Payment, ...]:
    # sorted は reverse=True でも安定
    return tuple(
        sorted(payments, key=lambda p: _amount_order(p.amount), reverse=True)
    )
