from __future__ import annotations

import pytest

from service_directory.application.dto.service_record_payload import parse_records


SCENARIO_SERVICES = [
    {
        "id": 1,
        "name": "Acme Plumbing",
        "tagline": "Pipes and drains",
        "description": "Residential plumbing repairs.",
        "category": "Home Services",
        "city": "Austin",
        "rating": 4.8,
        "reviews": 120,
        "price": "$",
    },
    {
        "id": 2,
        "name": "Zen Spa",
        "tagline": "Relax and unwind",
        "description": "Massage and facials.",
        "category": "Health & Wellness",
        "city": "Austin",
        "rating": 4.5,
        "reviews": 80,
        "price": "$$",
    },
    {
        "id": 3,
        "name": "Acme Tech",
        "tagline": "IT support",
        "description": "Managed networks for small offices.",
        "category": "Technology",
        "city": "Dallas",
        "rating": 4.9,
        "reviews": 50,
        "price": "$$$",
    },
]


@pytest.fixture
def scenario_raw():
    return [dict(item) for item in SCENARIO_SERVICES]


@pytest.fixture
def scenario_records():
    return parse_records(SCENARIO_SERVICES)
