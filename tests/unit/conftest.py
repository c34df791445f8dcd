from unittest.mock import MagicMock

import pytest

from payment_ledger.payment.domain.entity.payment import Payment
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus
from payment_ledger.payment.infrastructure.in_memory_payment_store import (
    InMemoryPaymentStore,
)

SAMPLE_PAYMENTS = [
    ("1", 120.0, PaymentStatus.SUCCESS),
    ("2", 75.5, PaymentStatus.PENDING),
    ("3", 300.0, PaymentStatus.FAILED),
    ("4", 20.0, PaymentStatus.SUCCESS),
    ("5", 250.0, PaymentStatus.PENDING),
]


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        payment_id: str = "test-id",
        amount: float = 100.0,
        currency: str = "USD",
        status: PaymentStatus = PaymentStatus.PENDING,
    ) -> Payment:
        return Payment(
            id=payment_id,
            amount=amount,
            currency=currency,
            status=status,
        )

    return _factory


@pytest.fixture
def store():
    return InMemoryPaymentStore()


@pytest.fixture
def sample_store(store, create_payment):
    """5件のサンプル決済を追加済みのストア"""
    for payment_id, amount, status in SAMPLE_PAYMENTS:
        store.add(create_payment(payment_id=payment_id, amount=amount, status=status))
    return store


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
