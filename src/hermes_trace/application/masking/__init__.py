"""Application Data Masking / PII."""
from hermes_trace.application.masking.config import DEFAULT_MASK, CustomMasker, MaskingConfig
from hermes_trace.application.masking.log_filter import PiiLogFilter
from hermes_trace.application.masking.masker import DataMasker, mask
from hermes_trace.application.masking.rules import ExactName, FieldMatcher, FieldPattern, MaskingRule
from hermes_trace.application.masking.settings import MaskingSettings
from hermes_trace.application.masking.strategies import (
    apply_masking_rule,
    mask_credit_card,
    mask_email,
    mask_value,
    partial_mask,
    preserve_length_mask,
    redact_patterns,
)

__all__ = [
    "DEFAULT_MASK",
    "CustomMasker",
    "DataMasker",
    "ExactName",
    "FieldMatcher",
    "FieldPattern",
    "MaskingConfig",
    "MaskingRule",
    "MaskingSettings",
    "PiiLogFilter",
    "apply_masking_rule",
    "mask",
    "mask_credit_card",
    "mask_email",
    "mask_value",
    "partial_mask",
    "preserve_length_mask",
    "redact_patterns",
]
