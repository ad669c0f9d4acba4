"""Team webhooks external API."""
