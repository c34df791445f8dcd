from .payment_status import PaymentStatus as PaymentStatus
