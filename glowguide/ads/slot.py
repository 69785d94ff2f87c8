from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, computed_field

ADSENSE_SCRIPT_URL = "https://pagead2.googlesyndication.com/pagead/js/adsbygoogle.js"


class AdSlot(BaseModel):
    script_url: str
    client: str
    slot: str
    layout: str
    format: str

    @computed_field
    @property
    def ins_attributes(self) -> dict[str, str]:
        """Attributes for the ``<ins class="adsbygoogle">`` placeholder."""
        return {
            "class": "adsbygoogle ad-slot",
            "data-ad-client": self.client,
            "data-ad-slot": self.slot,
            "data-ad-layout": self.layout,
            "data-ad-format": self.format,
        }


def ad_script_url(client: str) -> str:
    return f"{ADSENSE_SCRIPT_URL}?client={quote(client, safe='')}"


def ad_slot(
    client: str | None,
    slot: str = "auto",
    layout: str = "in-article",
    fmt: str = "fluid",
) -> AdSlot | None:
    """Return the slot config, or ``None`` when no ad client is set."""
    if not client:
        return None
    return AdSlot(
        script_url=ad_script_url(client),
        client=client,
        slot=slot,
        layout=layout,
        format=fmt,
    )
