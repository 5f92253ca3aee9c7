from .order_domain_service import OrderDomainService

__all__ = ["OrderDomainService"]
