"""Shared fixtures for citation tests."""

import pytest

from sitasi.core.models import BibliographicRecord


@pytest.fixture
def sample_records():
    """Provide diverse sample records for testing."""
    return {
        "basic": BibliographicRecord(
            title="Fiqh Dasar",
            author="Ahmad Sanusi",
            publish_year=2020,
            publisher="An-Nur Press",
        ),
        "full": BibliographicRecord(
            title="Tafsir Ringkas Juz Amma",
            author="Hasan, Umar Faruq",
            editor="Abdullah Hakim",
            publisher="Pustaka Santri",
            publish_year=2018,
            edition="Edisi ke-2",
            pages=340,
            doi="10.1234/tafsir.2018",
            isbn="978-602-0000-00-1",
        ),
        "family_name": BibliographicRecord(
            title="Sejarah Pesantren",
            author="Muhammad Abdul Karim",
            author_family_name="Abdul Karim",
            publisher="Lentera Ilmu",
            publish_year=2015,
        ),
        "single_name": BibliographicRecord(
            title="Kitab Adab",
            author="Zarnuji",
            publisher="Darul Ilmi",
            publish_year=2001,
        ),
        "no_author": BibliographicRecord(
            title="Panduan Santri Baru",
            publisher="Pesantren An-Nur",
            publish_year=2022,
        ),
        "no_year": BibliographicRecord(
            title="Risalah Wudhu",
            author="Siti Aminah",
            publisher="An-Nur Press",
        ),
        "title_only": BibliographicRecord(title="Catatan Harian"),
    }
