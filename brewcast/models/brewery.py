"""Open Brewery DB record model."""

from dataclasses import dataclass


def _text(raw: dict, key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class BreweryRecord:
    name: str
    street: str = ""
    address_2: str = ""
    address_3: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    phone: str = ""
    website_url: str = ""
    brewery_type: str = ""
    id: str = ""

    @classmethod
    def from_api(cls, raw: dict) -> "BreweryRecord":
        """Build a record from one Open Brewery DB JSON object.

        Null fields become empty strings. Newer API versions send
        ``address_1`` instead of ``street``.
        """
        return cls(
            name=_text(raw, "name"),
            street=_text(raw, "street") or _text(raw, "address_1"),
            address_2=_text(raw, "address_2"),
            address_3=_text(raw, "address_3"),
            city=_text(raw, "city"),
            state=_text(raw, "state") or _text(raw, "state_province"),
            postal_code=_text(raw, "postal_code"),
            phone=_text(raw, "phone"),
            website_url=_text(raw, "website_url"),
            brewery_type=_text(raw, "brewery_type"),
            id=_text(raw, "id"),
        )
