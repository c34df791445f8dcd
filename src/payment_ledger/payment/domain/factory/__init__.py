from .payment_factory import PaymentDetails as PaymentDetails
from .payment_factory import PaymentFactory as PaymentFactory
