"""Shared fixtures for importer tests."""

import pytest


@pytest.fixture
def products_json():
    """Catalogue export with product rows."""
    return """
{
  "products": [
    {
      "name": "Fiqh Dasar",
      "slug": "fiqh-dasar",
      "author": "Ahmad Sanusi",
      "publisher": "An-Nur Press",
      "publish_year": 2020,
      "price": 85000
    },
    {
      "name": "Risalah Wudhu",
      "slug": "risalah-wudhu",
      "author": "Siti Aminah",
      "author_family_name": "Aminah",
      "publish_year": null,
      "price": 30000
    }
  ]
}
"""


@pytest.fixture
def records_yaml():
    """Hand-written YAML record file."""
    return """\
- title: Tafsir Ringkas
  author: Hasan, Umar
  publish_year: 2018
  edition: Edisi ke-2
- title: Kitab Adab
  author: Zarnuji
"""
