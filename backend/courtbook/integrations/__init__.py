from .stripe_gateway import PaymentGateway, StripeGateway

__all__ = ["PaymentGateway", "StripeGateway"]
