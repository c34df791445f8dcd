from .payment.domain import Payment as Payment
from .payment.domain import PaymentStatus as PaymentStatus
from .payment.infrastructure import InMemoryPaymentStore as InMemoryPaymentStore
from .shared.domain import DomainException as DomainException
from .shared.domain import InvalidArgumentException as InvalidArgumentException
