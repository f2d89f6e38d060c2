"""Application masking – environment-driven masking settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from hermes_trace.application.masking.config import DEFAULT_MASK, CustomMasker, MaskingConfig
from hermes_trace.application.masking.rules import MaskingRule
from hermes_trace.config.settings import Settings
from hermes_trace.config.validation import InvalidSettingValueError
from hermes_trace.kernel.security import DEFAULT_SENSITIVE_FIELDS


@dataclasses.dataclass
class MaskingSettings(Settings):
    """Masking options read from ``HERMES_MASKING_*`` variables.

    Rules and the custom masker are code, not configuration; pass them to
    :meth:`to_config`.

    Example::

        settings = EnvSettingsLoader().load(MaskingSettings)
        masker = DataMasker(settings.to_config())
    """

    _prefix: ClassVar[str] = "HERMES_MASKING"

    enabled: bool = True
    default_mask: str = DEFAULT_MASK
    sensitive_fields: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_SENSITIVE_FIELDS)
    )

    def _validate(self) -> None:
        if not self.default_mask:
            raise InvalidSettingValueError("default_mask", self.default_mask, "must not be empty")

    def to_config(
        self,
        rules: list[MaskingRule] | None = None,
        custom_masker: CustomMasker | None = None,
    ) -> MaskingConfig:
        return MaskingConfig(
            enabled=self.enabled,
            default_mask=self.default_mask,
            rules=list(rules or []),
            sensitive_fields=list(self.sensitive_fields),
            custom_masker=custom_masker,
        )


__all__ = ["MaskingSettings"]
