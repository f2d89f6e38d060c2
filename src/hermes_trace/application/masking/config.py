from __future__ import annotations

import dataclasses
from typing import Any, Callable

from hermes_trace.application.masking.rules import MaskingRule
from hermes_trace.kernel.security import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_MASK", "CustomMasker", "MaskingConfig"]

DEFAULT_MASK = "***"

CustomMasker = Callable[[Any, Any], Any]


@dataclasses.dataclass
class MaskingConfig:
    """Construction-time options for a :class:`DataMasker`.

    Supplying ``sensitive_fields`` replaces the built-in table entirely.
    """

    enabled: bool = True
    default_mask: str = DEFAULT_MASK
    rules: list[MaskingRule] = dataclasses.field(default_factory=list)
    sensitive_fields: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_SENSITIVE_FIELDS)
    )
    custom_masker: CustomMasker | None = None

    def copy(self) -> MaskingConfig:
        """Return a copy whose lists can be mutated independently."""
        return dataclasses.replace(
            self,
            rules=list(self.rules),
            sensitive_fields=list(self.sensitive_fields),
        )
