"""pytest configuration and shared fixtures."""

import pytest


@pytest.fixture
def form_payload():
    """Raw form submission: every field arrives as text."""
    return {
        "name": "  Alice  ",
        "subscribed": "true",
        "age": "30",
        "price": "1.234,56",
        "discount": "$1,234.-",
        "tags": '["new", "sale"]',
        "address": '{"city": "Lisbon"}',
        "category": "-1",
        "comment": "",
        "referrer": "undefined",
    }


@pytest.fixture
def html_snippet():
    """Small article body with a heading, paragraph, emphasis and link."""
    return (
        "<h1>Weekly Deals</h1>"
        "<p>Buy <strong>NOW</strong> at "
        '<a href="https://example.com/shop">Our Shop</a></p>'
    )
