"""Application masking – pure masking algorithms.

Every function here is free of engine state: the token to use is always
passed in explicitly, which keeps them usable outside :class:`DataMasker`.
"""
from __future__ import annotations

import re
from typing import Any

from hermes_trace.application.masking.rules import MaskingRule

__all__ = [
    "apply_masking_rule",
    "mask_credit_card",
    "mask_email",
    "mask_value",
    "partial_mask",
    "preserve_length_mask",
    "redact_patterns",
]

# Keep the first and last _EDGE characters visible in partial masks.
_EDGE = 2

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)
_PHONE_RE = re.compile(r"(\+?1[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}", re.ASCII)
_CARD_RE = re.compile(r"\b(?:\d{4}[-\s]?){3}\d{4}\b", re.ASCII)
_SSN_RE = re.compile(r"\b\d{3}-?\d{2}-?\d{4}\b", re.ASCII)
_NON_DIGIT_RE = re.compile(r"\D", re.ASCII)


def preserve_length_mask(value: str, mask: str) -> str:
    """Mask *value* with a string of the same length.

    Only single-character tokens can be stretched; a longer token is
    returned as-is.
    """
    if len(mask) == 1:
        return mask * len(value)
    return mask


def partial_mask(value: str, mask: str, preserve_length: bool = False) -> str:
    if len(value) <= 2 * _EDGE:
        return preserve_length_mask(value, mask) if preserve_length else mask
    middle = mask * (len(value) - 2 * _EDGE) if preserve_length else mask
    return f"{value[:_EDGE]}{middle}{value[-_EDGE:]}"


def mask_value(value: Any, mask: str) -> Any:
    """Mask the value of a sensitive field."""
    match value:
        case None:
            return None
        case str():
            return preserve_length_mask(value, mask)
        case _:
            return mask


def apply_masking_rule(value: Any, rule: MaskingRule, default_mask: str) -> Any:
    if value is None:
        return None
    mask = rule.mask or default_mask
    if not isinstance(value, str):
        return mask
    if rule.partial:
        return partial_mask(value, mask, rule.preserve_length)
    if rule.preserve_length:
        return preserve_length_mask(value, mask)
    return mask


def mask_email(email: str, mask: str) -> str:
    """``john.doe@example.com`` -> ``j***e@example.com``."""
    local, _, domain = email.partition("@")
    if len(local) <= 2:
        return f"{mask}@{domain}"
    return f"{local[0]}{mask}{local[-1]}@{domain}"


def mask_credit_card(card: str, mask: str) -> str:
    """Keep the last four digits, one token per hidden digit."""
    digits = _NON_DIGIT_RE.sub("", card)
    if len(digits) < 8:
        return mask
    return mask * (len(digits) - 4) + digits[-4:]


def redact_patterns(text: str, mask: str) -> str:
    """Scrub emails, phone numbers, card numbers and SSNs out of free text.

    Substitutions run in that order over the whole string, each seeing the
    output of the previous one.
    """
    text = _EMAIL_RE.sub(lambda m: mask_email(m.group(0), mask), text)
    text = _PHONE_RE.sub(lambda _m: mask, text)
    text = _CARD_RE.sub(lambda m: mask_credit_card(m.group(0), mask), text)
    return _SSN_RE.sub(lambda _m: mask, text)
