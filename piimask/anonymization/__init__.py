from piimask.anonymization.anonymizer import Anonymizer
from piimask.anonymization.base import BaseAnonymizer
from piimask.anonymization.factory import AnonymizerFactory
from piimask.anonymization.models import (
    MARKERS,
    AnonymizationResult,
    AnonymizeMetadata,
    AnonymizeOptions,
    Category,
)
from piimask.anonymization.options import options_from_dict, options_from_ui_dict
from piimask.anonymization.service import anonymize

__all__ = [
    "MARKERS",
    "AnonymizationResult",
    "AnonymizeMetadata",
    "AnonymizeOptions",
    "Anonymizer",
    "AnonymizerFactory",
    "BaseAnonymizer",
    "Category",
    "anonymize",
    "options_from_dict",
    "options_from_ui_dict",
]
