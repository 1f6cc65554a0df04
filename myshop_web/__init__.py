"""MyShop HTTP API."""
