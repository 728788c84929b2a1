"""Transactional e-mail client."""

from terminal_ai.boundary.email.resend_client import ResendEmailClient

__all__ = ["ResendEmailClient"]
