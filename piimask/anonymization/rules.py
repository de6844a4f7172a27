"""Detection rules, in the order the anonymizer applies them.

Names run first and the narrower numeric shapes later. Phones accept only
space and hyphen separators, which keeps dotted dates and IPv4 addresses
out of the phone pass. Addresses accept the name marker as a street name.
"""

import regex

from piimask.anonymization.models import MARKERS, Category, DetectionRule

_CYR_WORD = r"[А-ЯЁ][а-яё]+"
_SURNAME = rf"{_CYR_WORD}(?:-{_CYR_WORD})?"

NAME_PATTERN = regex.compile(
    rf"(?<!\w){_SURNAME}"
    rf"(?:\s+[А-ЯЁ]\.\s?(?:[А-ЯЁ]\.)?"
    rf"|(?:\s+{_CYR_WORD}){{1,2}}(?!\w))"
)

EMAIL_PATTERN = regex.compile(r"(?<!\w)[\w.+-]+@(?:[\w-]+\.)+[\w-]{2,63}(?!\w)")

# Phone separators are single spaces or hyphens; a match must take the
# whole digit run and hold 7 to 15 digits. Hyphenated and ISO dates and
# space-grouped thousands ("1 500 000") are not phones.
_PHONE_GROUP = r"(?:\(\d{1,4}\)|\d{1,4})"
_NOT_PHONE = (
    r"\d{1,2}-\d{1,2}-\d{2,4}(?!\d)"
    r"|\d{4}-\d{1,2}-\d{1,2}(?!\d)"
    r"|\d{1,3}(?: \d{3})+(?![ -]?\d)"
)

PHONE_PATTERN = regex.compile(
    rf"(?<![\w+]|\d[ .-])"
    rf"(?!{_NOT_PHONE})"
    rf"\+?"
    rf"(?=(?:[ ()-]*\d){{7,15}}(?![ ()-]*\d))"
    rf"{_PHONE_GROUP}(?:[ -]?{_PHONE_GROUP}){{1,6}}"
    rf"(?![ ()-]*\d)(?!\w)"
)

DATE_PATTERN = regex.compile(r"(?<![\d.])\d{1,2}[./-]\d{1,2}[./-]\d{2,4}(?!\.?\d)")

_STREET_TYPE = (
    r"(?i:улица|ул|проспект|просп|пр-т|переулок|пер|набережная|наб"
    r"|бульвар|б-р|шоссе|ш|площадь|пл)"
)
_PROPER_NAME = r"[А-ЯЁ][а-яё]+(?:-[А-ЯЁа-яё]+)?"
_SEP = r"(?:\.\s*|\s+)"
# Street and city names may already be masked by the name pass.
_PLACE_NAME = rf"(?:{_PROPER_NAME}|\[ИМЯ\])"

ADDRESS_PATTERN = regex.compile(
    rf"(?<!\w)"
    rf"(?:(?i:город|г){_SEP}{_PLACE_NAME},\s*)?"
    rf"(?:{_STREET_TYPE}{_SEP}{_PLACE_NAME}(?:\s+{_PLACE_NAME})?"
    rf"|{_PROPER_NAME}\s+{_STREET_TYPE}\.?)"
    rf",?\s*(?:(?i:дом|д){_SEP})?\d+[а-яё]?(?:/\d+)?"
    rf"(?:,?\s*(?i:корп|кв|стр|к){_SEP}?\d+)*"
    rf"(?!\w)"
)

_OCTET = r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)"

IP_PATTERN = regex.compile(rf"(?<![\d.]){_OCTET}(?:\.{_OCTET}){{3}}(?!\.?\d)")

DETECTION_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(Category.NAME, NAME_PATTERN, MARKERS[Category.NAME]),
    DetectionRule(Category.EMAIL, EMAIL_PATTERN, MARKERS[Category.EMAIL]),
    DetectionRule(Category.PHONE, PHONE_PATTERN, MARKERS[Category.PHONE]),
    DetectionRule(Category.DATE, DATE_PATTERN, MARKERS[Category.DATE]),
    DetectionRule(Category.ADDRESS, ADDRESS_PATTERN, MARKERS[Category.ADDRESS]),
    DetectionRule(Category.IP, IP_PATTERN, MARKERS[Category.IP]),
)
