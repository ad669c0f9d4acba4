"""HTTP middleware for the webhooks API."""
