"""
Utility functions and helpers for the webhooks API.
"""

# Import functions to make them available through the package
from app.utils.logging import configure_logging
from app.utils.webhook import format_external_webhook, format_external_webhooks

# Export all the functions that should be available when importing from app.utils
__all__ = ["configure_logging", "format_external_webhook", "format_external_webhooks"]
