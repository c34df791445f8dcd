import pytest

from payment_ledger.payment.applications.register_payments import (
    DEFAULT_MAX_WORKERS,
    RegisterPaymentsService,
)
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus
from payment_ledger.shared.domain.exception import InvalidArgumentException


class TestRegisterPaymentsService:
    def test_register_adds_payment(self, mock_repository, create_payment):
        service = RegisterPaymentsService(repository=mock_repository)
        payment = create_payment()

        result = service.register(payment)

        assert result is payment
        mock_repository.add.assert_called_once_with(payment)

    def test_register_all_adds_every_payment(self, store, create_payment):
        service = RegisterPaymentsService(repository=store, max_workers=8)
        payments = [
            create_payment(payment_id=str(i), amount=float(i), status=PaymentStatus.SUCCESS)
            for i in range(1, 101)
        ]

        registered = service.register_all(payments)

        assert registered == 100
        assert store.count() == 100
        assert store.total_success_amount() == 5050.0
        assert set(store.all()) == set(payments)

    def test_register_all_raises_after_adding_valid_payments(self, store, create_payment):
        service = RegisterPaymentsService(repository=store, max_workers=2)
        payments = [create_payment(payment_id="1"), None, create_payment(payment_id="2")]

        with pytest.raises(InvalidArgumentException):
            service.register_all(payments)

        assert store.count() == 2

    def test_register_all_with_nothing(self, mock_repository):
        service = RegisterPaymentsService(repository=mock_repository)
        assert service.register_all([]) == 0
        mock_repository.add.assert_not_called()

    def test_max_workers_from_environment(self, mock_repository, monkeypatch):
        monkeypatch.setenv("PAYMENT_LEDGER_MAX_WORKERS", "12")
        service = RegisterPaymentsService(repository=mock_repository)
        assert service.max_workers == 12

    def test_max_workers_default(self, mock_repository, monkeypatch):
        monkeypatch.delenv("PAYMENT_LEDGER_MAX_WORKERS", raising=False)
        service = RegisterPaymentsService(repository=mock_repository)
        assert service.max_workers == DEFAULT_MAX_WORKERS

    def test_max_workers_argument_overrides_environment(
        self, mock_repository, monkeypatch
    ):
        monkeypatch.setenv("PAYMENT_LEDGER_MAX_WORKERS", "12")
        service = RegisterPaymentsService(repository=mock_repository, max_workers=3)
        assert service.max_workers == 3

    @pytest.mark.parametrize("max_workers", [0, -1])
    def test_non_positive_max_workers_is_rejected(
        self, mock_repository, monkeypatch, max_workers
    ):
        monkeypatch.setenv("PAYMENT_LEDGER_MAX_WORKERS", "12")
        with pytest.raises(InvalidArgumentException):
            RegisterPaymentsService(repository=mock_repository, max_workers=max_workers)

    def test_non_integer_environment_is_rejected(self, mock_repository, monkeypatch):
        monkeypatch.setenv("PAYMENT_LEDGER_MAX_WORKERS", "many")
        with pytest.raises(InvalidArgumentException):
            RegisterPaymentsService(repository=mock_repository)

    def test_register_all_continues_after_failure(self, mock_repository, create_payment):
        mock_repository.add.side_effect = [None, InvalidArgumentException("bad"), None]
        service = RegisterPaymentsService(repository=mock_repository, max_workers=1)

        with pytest.raises(InvalidArgumentException, match="bad"):
            service.register_all([create_payment(), create_payment(), create_payment()])

        assert mock_repository.add.call_count == 3
