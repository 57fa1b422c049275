"""Records decoded from Intento API responses."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


def _as_dict(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return data or {}


@dataclass(frozen=True)
class LanguagePair:
    from_lang: str = ""
    to_lang: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "LanguagePair":
        data = _as_dict(data)
        return cls(from_lang=data.get("from") or "", to_lang=data.get("to") or "")


@dataclass(frozen=True)
class Provider:
    """A translation backend and its capabilities."""

    production: bool = False
    integrated: bool = False
    billable: bool = False
    own_auth: bool = False
    stock_model: bool = False
    custom_model: bool = False
    delegated_credentials: bool = False
    async_only: bool = False
    id: str = ""
    name: str = ""
    vendor: str = ""
    score: int = 0
    price: int = 0
    api_id: str = ""
    picture: str = ""
    type: str = ""
    description: str = ""
    tone: Tuple[str, ...] = ()
    symmetric: Tuple[str, ...] = ()
    pairs: Tuple[LanguagePair, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Provider":
        data = _as_dict(data)
        return cls(
            production=bool(data.get("production")),
            integrated=bool(data.get("integrated")),
            billable=bool(data.get("billable")),
            own_auth=bool(data.get("own_auth")),
            stock_model=bool(data.get("stock_model")),
            custom_model=bool(data.get("custom_model")),
            delegated_credentials=bool(data.get("delegated_credentials")),
            async_only=bool(data.get("async_only")),
            id=data.get("id") or "",
            name=data.get("name") or "",
            vendor=data.get("vendor") or "",
            score=data.get("score") or 0,
            price=data.get("price") or 0,
            api_id=data.get("api_id") or "",
            picture=data.get("picture") or "",
            type=data.get("type") or "",
            description=data.get("description") or "",
            tone=tuple(data.get("tone") or ()),
            symmetric=tuple(data.get("symmetric") or ()),
            pairs=tuple(LanguagePair.from_dict(p) for p in data.get("pairs") or ()),
        )


@dataclass(frozen=True)
class Language:
    intento_code: str = ""
    iso_name: str = ""
    localized_name: str = ""
    client_code: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Language":
        data = _as_dict(data)
        return cls(
            intento_code=data.get("intento_code") or "",
            iso_name=data.get("iso_name") or "",
            localized_name=data.get("localized_name") or "",
            client_code=data.get("client_code") or "",
        )


@dataclass(frozen=True)
class SmartRouting:
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SmartRouting":
        data = _as_dict(data)
        return cls(name=data.get("name") or "", description=data.get("description") or "")


@dataclass(frozen=True)
class ServiceProvider:
    """Provider that served a translation, as echoed by the service."""

    id: str = ""
    name: str = ""
    vendor: str = ""
    description: str = ""
    logo: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ServiceProvider":
        data = _as_dict(data)
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            vendor=data.get("vendor") or "",
            description=data.get("description") or "",
            logo=data.get("logo") or "",
        )


@dataclass(frozen=True)
class TranslationMeta:
    # Filled only when the source language was auto-detected.
    detected_source_language: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TranslationService:
    provider: ServiceProvider = field(default_factory=ServiceProvider)


@dataclass(frozen=True)
class TranslationResult:
    """Result of a translate call.

    results[i] is the translation of the i-th input text.
    """

    id: str = ""
    results: Tuple[str, ...] = ()
    meta: TranslationMeta = field(default_factory=TranslationMeta)
    service: TranslationService = field(default_factory=TranslationService)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TranslationResult":
        data = _as_dict(data)
        meta = _as_dict(data.get("meta"))
        service = _as_dict(data.get("service"))
        return cls(
            id=data.get("id") or "",
            results=tuple(data.get("results") or ()),
            meta=TranslationMeta(
                detected_source_language=tuple(meta.get("detected_source_language") or ())
            ),
            service=TranslationService(
                provider=ServiceProvider.from_dict(service.get("provider"))
            ),
        )
