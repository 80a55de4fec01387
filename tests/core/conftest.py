"""Shared fixtures for core tests."""

import pytest


@pytest.fixture
def product_row():
    """A catalogue product row as returned by the content backend."""
    return {
        "id": "7f1c2a4e-0000-4000-8000-000000000001",
        "name": "Fiqh Dasar",
        "slug": "fiqh-dasar",
        "author": "Ahmad Sanusi",
        "author_family_name": None,
        "author_affiliation": "Pondok Pesantren An-Nur",
        "editor": "",
        "publisher": "An-Nur Press",
        "publish_year": 2020,
        "edition": None,
        "pages": 212,
        "language": "Indonesia",
        "isbn": "978-602-1234-56-7",
        "doi": None,
        "price": 85000,
        "discount_price": None,
        "stock": 12,
        "is_active": True,
        "product_type": "book",
        "keywords": ["fiqh", "ibadah"],
    }
