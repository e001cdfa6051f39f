from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from service_directory.domain.entities.service_record import ServiceRecord


@dataclass(frozen=True)
class FeaturePreview:
    shown: tuple[str, ...]
    hidden_count: int  # rendered as a "+N" chip when > 0


def get_phone(record: ServiceRecord) -> str:
    return record.phone or ""


def get_email(record: ServiceRecord) -> str:
    return record.email or ""


def phone_uri(record: ServiceRecord) -> str | None:
    phone = get_phone(record).strip()
    if not phone:
        return None
    # Keep dialable characters only
    dialable = "".join(ch for ch in phone if ch.isdigit() or ch in "+*#")
    return f"tel:{dialable}" if dialable else None


def email_uri(record: ServiceRecord) -> str | None:
    email = get_email(record).strip()
    if not email:
        return None
    return f"mailto:{quote(email, safe='@.+-_')}"


def feature_preview(record: ServiceRecord, limit: int = 2) -> FeaturePreview:
    limit = max(0, limit)
    features = tuple(record.features or ())
    return FeaturePreview(shown=features[:limit], hidden_count=max(0, len(features) - limit))
