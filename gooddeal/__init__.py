"""GoodDeal storefront: catalog, orders and admin console API plus its client package."""

__version__ = "0.1.0"
