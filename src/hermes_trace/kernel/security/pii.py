"""Kernel security – default sensitive field names.

The table is immutable; every masker copies it at construction so that
per-instance additions and removals never leak into other instances.
"""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: tuple[str, ...] = (
    "password",
    "secret",
    "token",
    "apiKey",
    "api_key",
    "accessToken",
    "access_token",
    "refreshToken",
    "refresh_token",
    "sessionToken",
    "session_token",
    "privateKey",
    "private_key",
    "creditCard",
    "credit_card",
    "ssn",
    "social_security",
    "email",
    "phone",
    "phoneNumber",
    "phone_number",
    "address",
    "zipCode",
    "zip_code",
    "postalCode",
    "postal_code",
)


__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
