import pytest

from piimask.anonymization.exceptions import OptionsValidationError
from piimask.anonymization.models import AnonymizeOptions
from piimask.anonymization.options import options_from_dict, options_from_ui_dict


class TestOptionsFromDict:
    def test_empty_payload_gives_defaults(self) -> None:
        assert options_from_dict({}) == AnonymizeOptions()

    def test_none_payload_gives_defaults(self) -> None:
        assert options_from_dict(None) == AnonymizeOptions()

    def test_reads_every_wire_key(self) -> None:
        options = options_from_dict(
            {
                "replaceNames": False,
                "replaceEmails": False,
                "replacePhones": False,
                "replaceDates": True,
                "replaceAddresses": True,
                "replaceIPs": True,
            }
        )
        assert options == AnonymizeOptions(
            replace_names=False,
            replace_emails=False,
            replace_phones=False,
            replace_dates=True,
            replace_addresses=True,
            replace_ips=True,
        )

    def test_null_flag_takes_default(self) -> None:
        assert options_from_dict({"replaceNames": None}).replace_names is True

    def test_unknown_keys_are_ignored(self) -> None:
        assert options_from_dict({"anonymizeNames": False}) == AnonymizeOptions()

    def test_non_boolean_flag_is_rejected(self) -> None:
        with pytest.raises(OptionsValidationError, match="'replaceDates' must be a boolean, got str"):
            options_from_dict({"replaceDates": "yes"})

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            options_from_dict({"replaceIPs": 1})


class TestOptionsFromUiDict:
    def test_reads_ui_keys(self) -> None:
        options = options_from_ui_dict(
            {"anonymizeNames": False, "anonymizeEmails": True, "anonymizePhones": False}
        )
        assert options.replace_names is False
        assert options.replace_emails is True
        assert options.replace_phones is False

    def test_categories_without_ui_switch_keep_defaults(self) -> None:
        options = options_from_ui_dict({"anonymizeNames": False})
        assert options.replace_dates is False
        assert options.replace_addresses is False
        assert options.replace_ips is False

    def test_wire_keys_are_not_sniffed(self) -> None:
        assert options_from_ui_dict({"replaceNames": False}) == AnonymizeOptions()

    def test_non_boolean_flag_is_rejected(self) -> None:
        with pytest.raises(OptionsValidationError, match="anonymizePhones"):
            options_from_ui_dict({"anonymizePhones": "false"})
