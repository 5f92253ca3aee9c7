from .payment_request_publisher import InMemoryPaymentRequestMessagePublisher

__all__ = ["InMemoryPaymentRequestMessagePublisher"]
