from .entity import Payment as Payment
from .enum import PaymentStatus as PaymentStatus
from .factory import PaymentDetails as PaymentDetails
from .factory import PaymentFactory as PaymentFactory
from .repository import PaymentRepository as PaymentRepository
