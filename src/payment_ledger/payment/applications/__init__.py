from .register_payments import RegisterPaymentsService as RegisterPaymentsService
from .summarize_payments import SummarizePaymentsService as SummarizePaymentsService
from .summary_models import PaymentData as PaymentData
from .summary_models import PaymentSummary as PaymentSummary
from .summary_models import to_response as to_response
