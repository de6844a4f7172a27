from piimask.anonymization.models import AnonymizeMetadata


class MetadataExtractor:
    """Converts anonymization counts to a JSON-serializable structure."""

    def extract(self, metadata: AnonymizeMetadata) -> dict[str, int]:
        """Transform AnonymizeMetadata into the camelCase payload.

        Returns:
            Dict with one ``*Count`` key per category plus ``totalReplacements``.
        """
        return {
            "namesCount": metadata.names_count,
            "emailsCount": metadata.emails_count,
            "phonesCount": metadata.phones_count,
            "datesCount": metadata.dates_count,
            "addressesCount": metadata.addresses_count,
            "ipsCount": metadata.ips_count,
            "totalReplacements": metadata.total_replacements,
        }
