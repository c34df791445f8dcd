import threading

from payment_ledger.payment.domain.enum.payment_status import PaymentStatus


class Payment:
    """決済レコード

    - id / amount / currency は生成時に一度だけ設定され、以後変更できない
    - status のみ変更可能で、レコードごとのロックを通して読み書きする
    - ストアのロックとは独立しているため、ステータス更新が追加処理を待たない
    - 同じ id を持つ別レコードも別の決済として扱う（同一性で比較する）
    """

    def __init__(
        self,
        id: str,
        amount: float,
        currency: str,
        status: PaymentStatus,
    ) -> None:
        self._status = PaymentStatus.from_value(status)
        self._status_lock = threading.Lock()
        self._id = id
        self._amount = amount
        self._currency = currency

    @property
    def id(self) -> str:
        return self._id

    @property
    def amount(self) -> float:
        return self._amount

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def status(self) -> PaymentStatus:
        with self._status_lock:
            return self._status

    @status.setter
    def status(self, status: PaymentStatus) -> None:
        new_status = PaymentStatus.from_value(status)
        with self._status_lock:
            self._status = new_status

    def compare_and_set_status(
        self, expected: PaymentStatus, status: PaymentStatus
    ) -> bool:
        """現在のステータスが expected の場合のみ status に置き換える

        置き換えた場合は True を返す。
        """
        expected_status = PaymentStatus.from_value(expected)
        new_status = PaymentStatus.from_value(status)
        with self._status_lock:
            if self._status != expected_status:
                return False
            self._status = new_status
            return True

    def to_display_string(self) -> str:
        """診断・ログ用の文字列表現"""
        return (
            f"Payment(id={self._id!r}, amount={self._amount!r}, "
            f"currency={self._currency!r}, status={self.status})"
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return self.to_display_string()
