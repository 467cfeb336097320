"""Requester identity."""

from apps.armory.presentation.http.auth.dependencies import get_requester_email

__all__ = ["get_requester_email"]
