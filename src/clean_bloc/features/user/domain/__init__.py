"""Business rules for the user feature. Nothing here knows about HTTP or JSON."""
