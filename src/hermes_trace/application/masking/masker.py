from __future__ import annotations

import dataclasses
import threading
from collections.abc import Mapping
from typing import Any

import structlog

from hermes_trace.application.masking.config import CustomMasker, MaskingConfig
from hermes_trace.application.masking.rules import MaskingRule
from hermes_trace.application.masking.strategies import (
    apply_masking_rule,
    mask_value,
    redact_patterns,
)

__all__ = ["DataMasker", "mask"]

_log = structlog.get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class _Snapshot:
    """Engine state read by a single masking pass."""

    default_mask: str
    rules: tuple[MaskingRule, ...]
    sensitive_fields: tuple[str, ...]
    sensitive: frozenset[str]
    custom_masker: CustomMasker | None

    def find_rule(self, key: str) -> MaskingRule | None:
        for rule in self.rules:
            if rule.matches(key):
                return rule
        return None


class DataMasker:
    """Recursively masks sensitive data in log payloads.

    Each mapping key goes through, in order: the custom masker (final if
    set), the first matching :class:`MaskingRule`, the sensitive field
    names; only keys that none of these claim are descended into.  Strings
    that reach the bottom of the walk are scanned for emails, phone
    numbers, card numbers and SSNs.

    Mutators replace the internal snapshot instead of editing it, so a
    masking pass already in progress keeps a consistent view.
    """

    def __init__(self, config: MaskingConfig | None = None) -> None:
        cfg = config.copy() if config is not None else MaskingConfig()
        self._enabled = cfg.enabled
        self._lock = threading.Lock()
        self._state = _Snapshot(
            default_mask=cfg.default_mask,
            rules=tuple(cfg.rules),
            sensitive_fields=tuple(cfg.sensitive_fields),
            sensitive=_lowered(cfg.sensitive_fields),
            custom_masker=cfg.custom_masker,
        )

    @property
    def enabled(self) -> bool:
        return self._enabled

    def mask_data(self, data: Any) -> Any:
        """Return a masked copy of *data*; *data* itself is never modified.

        Self-referencing structures are not detected and end in
        :class:`RecursionError`.
        """
        if not self._enabled:
            return data
        return self._walk(data, self._state)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _walk(self, node: Any, state: _Snapshot) -> Any:
        match node:
            case None:
                return None
            case str():
                return redact_patterns(node, state.default_mask)
            case Mapping():
                return {key: self._mask_entry(key, value, state) for key, value in node.items()}
            case list():
                return [self._walk(item, state) for item in node]
            case tuple():
                return tuple(self._walk(item, state) for item in node)
            case _:
                return node

    def _mask_entry(self, key: Any, value: Any, state: _Snapshot) -> Any:
        if state.custom_masker is not None:
            return state.custom_masker(key, value)
        name = str(key)
        rule = state.find_rule(name)
        if rule is not None:
            return apply_masking_rule(value, rule, state.default_mask)
        if name.lower() in state.sensitive:
            return mask_value(value, state.default_mask)
        return self._walk(value, state)

    # ------------------------------------------------------------------
    # Runtime configuration
    # ------------------------------------------------------------------

    def add_sensitive_field(self, field: str) -> None:
        with self._lock:
            fields = self._state.sensitive_fields
            if field in fields:
                return
            self._publish_fields((*fields, field))
        _log.debug("masking.sensitive_field_added", field=field)

    def remove_sensitive_field(self, field: str) -> None:
        with self._lock:
            fields = self._state.sensitive_fields
            if field not in fields:
                return
            self._publish_fields(tuple(f for f in fields if f != field))
        _log.debug("masking.sensitive_field_removed", field=field)

    def add_masking_rule(self, rule: MaskingRule) -> None:
        with self._lock:
            self._publish(rules=(*self._state.rules, rule))
        _log.debug("masking.rule_added", field=rule.field, partial=rule.partial)

    def set_custom_masker(self, masker: CustomMasker | None) -> None:
        with self._lock:
            self._publish(custom_masker=masker)
        _log.debug("masking.custom_masker_set", installed=masker is not None)

    def get_masking_config(self) -> MaskingConfig:
        """Return a snapshot of the configuration; editing it has no effect here."""
        state = self._state
        return MaskingConfig(
            enabled=self._enabled,
            default_mask=state.default_mask,
            rules=list(state.rules),
            sensitive_fields=list(state.sensitive_fields),
            custom_masker=state.custom_masker,
        )

    def _publish(self, **changes: Any) -> None:
        self._state = dataclasses.replace(self._state, **changes)

    def _publish_fields(self, fields: tuple[str, ...]) -> None:
        self._publish(sensitive_fields=fields, sensitive=_lowered(fields))


def _lowered(fields: list[str] | tuple[str, ...]) -> frozenset[str]:
    return frozenset(f.lower() for f in fields)


def mask(data: Any, config: MaskingConfig | None = None) -> Any:
    """Mask *data* once with a throwaway :class:`DataMasker`."""
    return DataMasker(config).mask_data(data)
