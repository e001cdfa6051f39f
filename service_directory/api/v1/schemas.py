from pydantic import BaseModel, Field

from service_directory.application.utils.contact import email_uri, feature_preview, phone_uri
from service_directory.domain.entities.service_record import ServiceRecord


class ServiceCardSchema(BaseModel):
    id: int | str
    name: str
    tagline: str
    category: str
    city: str
    rating: float
    reviews: int
    price: str
    features: list[str] = Field(default_factory=list)
    more_features: int = 0
    color: str = ""
    image: str = ""
    is_favorite: bool = False

    @classmethod
    def from_record(cls, record: ServiceRecord, is_favorite: bool = False) -> "ServiceCardSchema":
        preview = feature_preview(record)
        return cls(
            id=record.id,
            name=record.name,
            tagline=record.tagline,
            category=record.category,
            city=record.city,
            rating=record.rating,
            reviews=record.reviews,
            price=record.price,
            features=list(preview.shown),
            more_features=preview.hidden_count,
            color=record.color,
            image=record.image,
            is_favorite=is_favorite,
        )


class ServiceDetailSchema(BaseModel):
    id: int | str
    name: str
    tagline: str
    description: str
    category: str
    city: str
    rating: float
    reviews: int
    price: str
    features: list[str] = Field(default_factory=list)
    color: str = ""
    image: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    phone_uri: str | None = None
    email_uri: str | None = None
    is_favorite: bool = False

    @classmethod
    def from_record(cls, record: ServiceRecord, is_favorite: bool = False) -> "ServiceDetailSchema":
        return cls(
            id=record.id,
            name=record.name,
            tagline=record.tagline,
            description=record.description,
            category=record.category,
            city=record.city,
            rating=record.rating,
            reviews=record.reviews,
            price=record.price,
            features=list(record.features),
            color=record.color,
            image=record.image,
            phone=record.phone,
            email=record.email,
            address=record.address,
            phone_uri=phone_uri(record),
            email_uri=email_uri(record),
            is_favorite=is_favorite,
        )


class FiltersSchema(BaseModel):
    search_term: str
    category: str
    city: str
    sort_mode: str


class FiltersUpdateSchema(BaseModel):
    search_term: str | None = None
    category: str | None = None
    city: str | None = None
    sort_mode: str | None = None


class SessionCreatedSchema(BaseModel):
    session_id: str


class ViewResponseSchema(BaseModel):
    session_id: str
    filters: FiltersSchema
    result_count: int
    headline: str
    description: str
    services: list[ServiceCardSchema]
    favorites_count: int = 0


class SortOptionSchema(BaseModel):
    mode: str
    label: str


class FacetsResponseSchema(BaseModel):
    categories: list[str]
    cities: list[str]
    sort_modes: list[SortOptionSchema]


class FavoritesResponseSchema(BaseModel):
    count: int
    services: list[ServiceCardSchema]


class FavoriteToggleResponseSchema(BaseModel):
    id: int | str
    is_favorite: bool
    favorites_count: int


class SelectionResponseSchema(BaseModel):
    status: str
    record_id: int | str | None = None
    service: ServiceDetailSchema | None = None
