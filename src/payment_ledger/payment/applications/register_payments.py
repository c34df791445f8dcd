import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from payment_ledger.payment.domain.entity import Payment
from payment_ledger.payment.domain.repository import PaymentRepository
from payment_ledger.shared.domain.exception import InvalidArgumentException
from payment_ledger.shared.utils import get_logger

logger = get_logger()

DEFAULT_MAX_WORKERS = 4


class RegisterPaymentsService:
    """決済登録ユースケース"""

    def __init__(
        self,
        repository: PaymentRepository,
        max_workers: int | None = None,
    ) -> None:
        self._repository = repository
        self._max_workers = self._resolve_max_workers(max_workers)

    @staticmethod
    def _resolve_max_workers(max_workers: int | None) -> int:
        """引数を優先し、未指定なら PAYMENT_LEDGER_MAX_WORKERS を使う"""
        if max_workers is None:
            raw = os.getenv("PAYMENT_LEDGER_MAX_WORKERS", str(DEFAULT_MAX_WORKERS))
            try:
                max_workers = int(raw)
            except ValueError as e:
                logger.warning("Invalid max_workers", extra={"max_workers": raw})
                raise InvalidArgumentException(
                    f"PAYMENT_LEDGER_MAX_WORKERS must be an integer: {raw!r}"
                ) from e
        if max_workers < 1:
            logger.warning("Invalid max_workers", extra={"max_workers": max_workers})
            raise InvalidArgumentException(
                f"max_workers must be at least 1: {max_workers}"
            )
        return max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def register(self, payment: Payment) -> Payment:
        """決済を1件登録する"""
        self._repository.add(payment)
        return payment

    def register_all(self, payments: Iterable[Payment]) -> int:
        """複数の決済を並列に登録し、登録できた件数を返す

        登録順は完了順となる。失敗した登録があっても他の登録は続行し、
        全件の完了後に最初の例外を送出する。
        """
        batch = list(payments)
        logger.info(
            "Registering payments",
            extra={"size": len(batch), "max_workers": self._max_workers},
        )

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [executor.submit(self._repository.add, p) for p in batch]

        errors = [e for f in futures if (e := f.exception()) is not None]
        registered = len(futures) - len(errors)
        logger.info(
            "Registered payments",
            extra={"registered": registered, "failed": len(errors)},
        )

        if errors:
            raise errors[0]
        return registered
