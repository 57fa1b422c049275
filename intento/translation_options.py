"""Translation options and the request body they encode to."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

FORMAT_HTML = "html"


def _omit_empty(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop entries at their zero value (False, "", [], {}, None)."""
    return {key: value for key, value in values.items() if value}


@dataclass
class TranslationContext:
    from_lang: str = ""
    to_lang: str = ""
    text: List[str] = field(default_factory=list)
    format: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({
            "from": self.from_lang,
            "to": self.to_lang,
            "text": list(self.text),
            "format": self.format,
        })


@dataclass
class CacheOptions:
    apply: bool = False
    update: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({"apply": self.apply, "update": self.update})


@dataclass
class NoTranslateOptions:
    prefix: str = ""
    suffix: str = ""
    remove_markup: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({
            "prefix": self.prefix,
            "suffix": self.suffix,
            "remove_markup": self.remove_markup,
        })


@dataclass
class ModerationOptions:
    action: str = ""
    used: bool = False
    content: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({
            "action": self.action,
            "used": self.used,
            "content": list(self.content),
        })


@dataclass
class ServiceOptions:
    async_mode: bool = False
    trace: bool = False
    provider: str = ""
    routing: str = ""
    cache: CacheOptions = field(default_factory=CacheOptions)
    notranslate: NoTranslateOptions = field(default_factory=NoTranslateOptions)
    moderation: ModerationOptions = field(default_factory=ModerationOptions)

    def to_dict(self) -> Dict[str, Any]:
        return _omit_empty({
            "async": self.async_mode,
            "trace": self.trace,
            "provider": self.provider,
            "routing": self.routing,
            "cache": self.cache.to_dict(),
            "notranslate": self.notranslate.to_dict(),
            "moderation": self.moderation.to_dict(),
        })


@dataclass
class TranslationOptions:
    """Body of a translate request.

    Fields left at their zero value are not serialized, since the service
    treats a missing field differently from an explicit false or empty one.
    The "context" object is always sent; "service" only when something in it
    is set.
    """

    context: TranslationContext = field(default_factory=TranslationContext)
    service: ServiceOptions = field(default_factory=ServiceOptions)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"context": self.context.to_dict()}
        service = self.service.to_dict()
        if service:
            body["service"] = service
        return body


class TranslationOption:
    """Wraps a function that modifies TranslationOptions."""

    def __init__(self, fn: Callable[[TranslationOptions], None]):
        self._fn = fn

    def apply(self, options: TranslationOptions) -> None:
        self._fn(options)


def translation_with_source_text_format(text_format: str) -> TranslationOption:
    """Specify the format of the source text (e.g. FORMAT_HTML)."""
    def fn(o: TranslationOptions) -> None:
        o.context.format = text_format

    return TranslationOption(fn)


def translation_with_trace() -> TranslationOption:
    """
    Enable payload logging on the service side.

    By default the service works in "no trace" mode and stores no payload.
    Turn tracing on when a reproducible error needs to be investigated by
    the support team.
    """
    def fn(o: TranslationOptions) -> None:
        o.service.trace = True

    return TranslationOption(fn)


def translation_with_provider(provider_id: str) -> TranslationOption:
    """Pin the translation to one provider."""
    def fn(o: TranslationOptions) -> None:
        o.service.provider = provider_id

    return TranslationOption(fn)


def translation_with_routing(routing: str) -> TranslationOption:
    """
    Select a smart routing scheme (e.g. "best").

    Smart routing picks the MT provider for the text and language pair from
    benchmark results and usage statistics. Accounts may also own custom
    schemes; list them with Client.smart_routing_list().
    """
    def fn(o: TranslationOptions) -> None:
        o.service.routing = routing

    return TranslationOption(fn)


def translation_with_cache(apply: bool, update: bool) -> TranslationOption:
    """
    Set the rules for the service-side translation cache.

    Args:
        apply: Take the translation from the cache when it is cached
        update: Store the translation in the cache after translating
    """
    def fn(o: TranslationOptions) -> None:
        o.service.cache.apply = apply
        o.service.cache.update = update

    return TranslationOption(fn)


def translation_with_no_translate_protection(
    prefix: str,
    suffix: str,
    remove_markup: bool
) -> TranslationOption:
    """
    Protect marked fragments of the text from translation.

    Fragments wrapped in prefix/suffix are kept as-is. Only works together
    with the html source format.

    Args:
        prefix: Opening marker, e.g. '<span class="notranslate">'
        suffix: Closing marker, e.g. '</span>'
        remove_markup: Strip the markers from the translated text
    """
    def fn(o: TranslationOptions) -> None:
        o.service.notranslate.prefix = prefix
        o.service.notranslate.suffix = suffix
        o.service.notranslate.remove_markup = remove_markup

    return TranslationOption(fn)


def translation_with_profanity_detection(content: List[str]) -> TranslationOption:
    """
    Run a moderation check on the translated content.

    The result is only reported; the translation itself is not modified.

    Args:
        content: Unwanted content types to detect (currently "profanity")
    """
    def fn(o: TranslationOptions) -> None:
        o.service.moderation.used = True
        o.service.moderation.content = list(content)
        o.service.moderation.action = "inform"

    return TranslationOption(fn)
