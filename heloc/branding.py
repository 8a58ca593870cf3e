"""Brand themes for the calculator page. Purely cosmetic."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Brand(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    name: str
    logoUrl: Optional[str] = None
    linkUrl: Optional[str] = None
    primaryColor: str
    accentColor: str
    headerColor: str


BRANDS: Dict[str, Brand] = {
    "nesto": Brand(
        key="nesto",
        name="nesto",
        logoUrl="https://www.nesto.ca/wp-content/themes/nesto/templates/objects/logo-nesto-en.svg",
        linkUrl="https://www.nesto.ca/",
        primaryColor="#fdba74",
        accentColor="#93c5fd",
        headerColor="#111827",
    ),
    "plain": Brand(
        key="plain",
        name="HELOC",
        primaryColor="#cbd5e1",
        accentColor="#a5b4fc",
        headerColor="#1e293b",
    ),
}

DEFAULT_BRAND = "nesto"


def get_brand(key: Optional[str]) -> Brand:
    """Look up a brand, falling back to the default for unknown keys."""
    return BRANDS.get(key or DEFAULT_BRAND, BRANDS[DEFAULT_BRAND])


def next_brand(key: Optional[str]) -> str:
    """Key of the brand after ``key`` in registry order (wraps around)."""
    keys: List[str] = list(BRANDS)
    current = get_brand(key).key
    return keys[(keys.index(current) + 1) % len(keys)]
