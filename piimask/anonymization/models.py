from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

import regex


class Category(str, Enum):
    """PII category handled by one detection rule."""

    NAME = "NAME"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    DATE = "DATE"
    ADDRESS = "ADDRESS"
    IP = "IP"


MARKERS: dict[Category, str] = {
    Category.NAME: "[ИМЯ]",
    Category.EMAIL: "[EMAIL]",
    Category.PHONE: "[ТЕЛЕФОН]",
    Category.DATE: "[ДАТА]",
    Category.ADDRESS: "[АДРЕС]",
    Category.IP: "[IP-АДРЕС]",
}


@dataclass(frozen=True)
class DetectionRule:
    """Pattern that finds one PII category and the marker that replaces it."""

    category: Category
    pattern: regex.Pattern[str]
    marker: str


_OPTION_FIELDS: dict[Category, str] = {
    Category.NAME: "replace_names",
    Category.EMAIL: "replace_emails",
    Category.PHONE: "replace_phones",
    Category.DATE: "replace_dates",
    Category.ADDRESS: "replace_addresses",
    Category.IP: "replace_ips",
}


@dataclass(frozen=True)
class AnonymizeOptions:
    """Per-category switches. Omitted fields keep their documented defaults."""

    replace_names: bool = True
    replace_emails: bool = True
    replace_phones: bool = True
    replace_dates: bool = False
    replace_addresses: bool = False
    replace_ips: bool = False

    @classmethod
    def only(cls, *categories: Category) -> AnonymizeOptions:
        """Options with exactly the given categories enabled."""
        return cls(**{name: category in categories for category, name in _OPTION_FIELDS.items()})

    @classmethod
    def none(cls) -> AnonymizeOptions:
        return cls.only()

    def is_enabled(self, category: Category) -> bool:
        return bool(getattr(self, _OPTION_FIELDS[category]))

    def to_dict(self) -> dict[str, bool]:
        """Wire representation with camelCase keys."""
        return {
            "replaceNames": self.replace_names,
            "replaceEmails": self.replace_emails,
            "replacePhones": self.replace_phones,
            "replaceDates": self.replace_dates,
            "replaceAddresses": self.replace_addresses,
            "replaceIPs": self.replace_ips,
        }


_COUNT_FIELDS: dict[Category, str] = {
    Category.NAME: "names_count",
    Category.EMAIL: "emails_count",
    Category.PHONE: "phones_count",
    Category.DATE: "dates_count",
    Category.ADDRESS: "addresses_count",
    Category.IP: "ips_count",
}


@dataclass(frozen=True)
class AnonymizeMetadata:
    """Number of markers of each category present in the anonymized text."""

    names_count: int = 0
    emails_count: int = 0
    phones_count: int = 0
    dates_count: int = 0
    addresses_count: int = 0
    ips_count: int = 0

    @classmethod
    def from_counts(cls, counts: dict[Category, int]) -> AnonymizeMetadata:
        return cls(**{name: counts.get(category, 0) for category, name in _COUNT_FIELDS.items()})

    @property
    def total_replacements(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def count_for(self, category: Category) -> int:
        return int(getattr(self, _COUNT_FIELDS[category]))


@dataclass
class AnonymizationResult:
    """Output of the anonymizer step."""

    anonymized_text: str
    metadata: AnonymizeMetadata = field(default_factory=AnonymizeMetadata)
    error: str | None = None  # set only when the original text was returned as a fallback
