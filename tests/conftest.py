from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def mock_logger() -> MagicMock:
    """Stand-in for the injectable logger; records every call."""
    return MagicMock()


@pytest.fixture()
def mixed_pii_text() -> str:
    """Russian text with one span of every PII category."""
    return (
        "Иванов Иван, email ivan@mail.ru, тел. 8 912 345 67 89, "
        "дата 01.02.2024, адрес г. Москва, ул. Ленина, д. 10, кв. 5, IP 10.0.0.1"
    )
