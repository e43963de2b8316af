"""
EuroAlt tests - test data builders
"""

from euroalt.schemas.alternative import Alternative


def build_alternative(**overrides) -> Alternative:
    """Minimal valid entry; keyword arguments override fields"""
    data = {
        "id": "test_alt",
        "name": "Test Alternative",
        "description": "A test entry",
        "website": "https://example.org",
        "country": "de",
        "category": "other",
        "pricing": "free",
        "is_open_source": False,
    }
    data.update(overrides)
    return Alternative(**data)
