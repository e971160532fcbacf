"""Presentation layer: events, states and the bloc that connects them."""
