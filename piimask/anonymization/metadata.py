from piimask.anonymization.models import MARKERS, AnonymizeMetadata


def calculate_metadata(text: str) -> AnonymizeMetadata:
    """Count the markers of every category present in *text*.

    Marker literals never contain one another, so plain substring counts
    do not overlap.
    """
    if not text:
        return AnonymizeMetadata()
    return AnonymizeMetadata.from_counts(
        {category: text.count(marker) for category, marker in MARKERS.items()}
    )
