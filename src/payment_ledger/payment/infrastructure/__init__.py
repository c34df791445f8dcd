from .in_memory_payment_store import InMemoryPaymentStore as InMemoryPaymentStore
