from __future__ import annotations

from urllib.parse import quote

from .models import Platform, ProductPick, ProductQuery, category_value

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"

SEARCH_URLS: dict[str, str] = {
    Platform.amazon.value: "https://www.amazon.in/s?k={query}",
    Platform.flipkart.value: "https://www.flipkart.com/search?q={query}",
}
PARTNER_PARAMS: dict[str, str] = {
    Platform.amazon.value: "tag",
    Platform.flipkart.value: "affid",
}
FALLBACK_SEARCH_URL = "https://www.google.com/search?q={query}"


def _encode(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_affiliate_link(
    platform: Platform | str | None,
    query: str,
    partner_tag: str | None = None,
) -> str:
    """
    Build a search URL for ``query`` on ``platform``.

    Known platforms get the partner tag appended as their referral
    parameter. Anything else gets a plain web-search URL with no tag.
    """
    key = category_value(platform)
    encoded = _encode(query or "")
    template = SEARCH_URLS.get(key or "")
    if template is None:
        return FALLBACK_SEARCH_URL.format(query=encoded)

    url = template.format(query=encoded)
    if partner_tag:
        url = f"{url}&{PARTNER_PARAMS[key]}={_encode(partner_tag)}"
    return url


def build_product_picks(
    queries: list[ProductQuery],
    partner_tags: dict[str, str] | None = None,
) -> list[ProductPick]:
    """Attach one affiliate link per supported platform to each query."""
    tags = partner_tags or {}
    picks: list[ProductPick] = []
    for q in queries:
        links = {
            platform.value: build_affiliate_link(
                platform, q.search_query, tags.get(platform.value),
            )
            for platform in Platform
        }
        picks.append(ProductPick(label=q.label, search_query=q.search_query, links=links))
    return picks
