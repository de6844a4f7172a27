"""Boundary conversions from option payloads to AnonymizeOptions.

Each accepted payload shape has its own named converter, so callers state
which shape they hold instead of relying on key sniffing.
"""

from collections.abc import Mapping

from piimask.anonymization.exceptions import OptionsValidationError
from piimask.anonymization.models import AnonymizeOptions

_DEFAULTS = AnonymizeOptions()

_WIRE_KEYS: dict[str, str] = {
    "replace_names": "replaceNames",
    "replace_emails": "replaceEmails",
    "replace_phones": "replacePhones",
    "replace_dates": "replaceDates",
    "replace_addresses": "replaceAddresses",
    "replace_ips": "replaceIPs",
}

_UI_KEYS: dict[str, str] = {
    "replace_names": "anonymizeNames",
    "replace_emails": "anonymizeEmails",
    "replace_phones": "anonymizePhones",
}


def options_from_dict(data: Mapping[str, object] | None) -> AnonymizeOptions:
    """Build options from the canonical wire payload (replaceNames, replaceEmails, ...).

    Missing or null flags take their defaults; unknown keys are ignored.

    Raises:
        OptionsValidationError: if a present flag is not a boolean.
    """
    return _convert(data or {}, _WIRE_KEYS)


def options_from_ui_dict(data: Mapping[str, object] | None) -> AnonymizeOptions:
    """Build options from the UI form payload (anonymizeNames, anonymizeEmails, anonymizePhones).

    The UI form has no switches for dates, addresses or IPs; those keep their defaults.

    Raises:
        OptionsValidationError: if a present flag is not a boolean.
    """
    return _convert(data or {}, _UI_KEYS)


def _convert(data: Mapping[str, object], keys: dict[str, str]) -> AnonymizeOptions:
    values = {field: _read_flag(data, key, getattr(_DEFAULTS, field)) for field, key in keys.items()}
    return AnonymizeOptions(**values)


def _read_flag(data: Mapping[str, object], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise OptionsValidationError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value
