"""Services subpackage - Shopify access and the request pipeline."""
from .shopify_service import ShopifyVariantClient, UpstreamFailure
from .quote_service import QuoteService

__all__ = ['ShopifyVariantClient', 'UpstreamFailure', 'QuoteService']
