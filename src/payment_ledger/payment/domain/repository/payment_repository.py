from abc import ABC, abstractmethod

from payment_ledger.payment.domain.entity.payment import Payment
from payment_ledger.payment.domain.enum.payment_status import PaymentStatus


class PaymentRepository(ABC):
    """決済リポジトリのインターフェース

    参照系の操作はすべて呼び出し時点のスナップショットに対して行う。
    """

    @abstractmethod
    def add(self, payment: Payment) -> None:
        """決済を末尾に追加する"""
        raise NotImplementedError

    @abstractmethod
    def all(self) -> tuple[Payment, ...]:
        """追加順のスナップショットを返す"""
        raise NotImplementedError

    @abstractmethod
    def by_status(self, status: PaymentStatus) -> tuple[Payment, ...]:
        """ステータスで絞り込む"""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """決済の総数"""
        raise NotImplementedError

    @abstractmethod
    def total_success_amount(self) -> float:
        """成功した決済の合計金額"""
        raise NotImplementedError

    @abstractmethod
    def average_success_amount(self) -> float:
        """成功した決済の平均金額"""
        raise NotImplementedError

    @abstractmethod
    def sorted_by_amount_descending(self) -> tuple[Payment, ...]:
        """金額の降順に並べる（同額は追加順を保つ）"""
        raise NotImplementedError
