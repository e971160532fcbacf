"""FastAPI server adapter for clean-bloc.

This module exposes the example user feature over HTTP.

Design intent:
- Keep business logic in `clean_bloc.features.*`
- Keep server-specific concerns (routing, response models) here

Run with: `uvicorn clean_bloc.server.app:create_app --factory`
"""

from __future__ import annotations

__all__ = ["create_app"]

from clean_bloc.server.app import create_app
