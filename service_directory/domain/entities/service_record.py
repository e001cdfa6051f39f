from __future__ import annotations

from dataclasses import dataclass, field

RecordId = int | str


@dataclass(frozen=True)
class ServiceRecord:
    id: RecordId
    name: str = ""
    tagline: str = ""
    description: str = ""
    category: str = ""
    city: str = ""
    rating: float = 0.0
    reviews: int = 0
    price: str = ""  # tier token, e.g. "$$"; only its length is meaningful
    features: tuple[str, ...] = field(default_factory=tuple)
    # Presentation/contact data, never inspected by filtering or sorting
    color: str = ""
    image: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
