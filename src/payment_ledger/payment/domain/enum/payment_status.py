from __future__ import annotations

from enum import Enum

from payment_ledger.shared.domain.exception import InvalidArgumentException
from payment_ledger.shared.utils import get_logger

logger = get_logger()


class PaymentStatus(str, Enum):
    """決済ステータス"""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: object) -> PaymentStatus:
        """値からステータスを取得する

        メンバーはそのまま返し、"SUCCESS" のような文字列はメンバーに変換する。
        None や未知の値は WARNING を記録してから InvalidArgumentException とする。
        """
        if isinstance(value, cls):
            return value
        if value is None:
            logger.warning("Rejected payment status", extra={"status": "None"})
            raise InvalidArgumentException("Status must not be None")
        try:
            return cls(value)
        except ValueError as e:
            logger.warning("Rejected payment status", extra={"status": repr(value)})
            raise InvalidArgumentException(f"Unknown payment status: {value!r}") from e
