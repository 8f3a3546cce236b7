"""Core domain models.

Categories, subcategories and links form the content tree; SiteConfig is the
stored site configuration document. Field names on the wire are camelCase
(`isPrivate`, `backgroundImageUrls`), matching what the browser client sends.
Unknown keys are kept so a tree round-trips unchanged through the store.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    PUBLIC = "public"
    GUEST = "guest"
    ADMIN = "admin"


class _Node(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("links", "subcategories", mode="before", check_fields=False)
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        return [] if v is None else v


class Link(_Node):
    """A single bookmark. Every field is stored as given, never validated."""

    id: Any = ""
    name: Any = ""
    url: Any = ""
    icon: Any = ""
    description: Any = ""


class Subcategory(_Node):
    id: Any = ""
    name: Any = ""
    is_private: Any = Field(default=False, alias="isPrivate")
    links: list[Link] = Field(default_factory=list)


class Category(_Node):
    """Top-level entity. `order` is derived from position on every write."""

    id: Any = ""
    name: Any = ""
    icon: Any = ""
    is_private: Any = Field(default=False, alias="isPrivate")
    order: int = 0
    subcategories: list[Subcategory] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)

    @field_validator("order", mode="before")
    @classmethod
    def _lenient_order(cls, v: Any) -> int:
        # Unsortable values sort first, as if absent.
        try:
            return int(v)
        except (TypeError, ValueError, OverflowError):
            return 0


def blank_if_none(v: Any) -> Any:
    """None becomes "", other non-strings their str(); for title-like fields."""
    if v is None:
        return ""
    return v if isinstance(v, str) else str(v)


class SiteConfig(BaseModel):
    """Stored config document. Images are data URLs, addressed by position."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    subtitle: str = Field(
        default="",
        validation_alias=AliasChoices("subtitle", "chineseTitle"),
    )
    background_images: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("background_images", "backgroundImages"),
        serialization_alias="backgroundImages",
    )

    @field_validator("title", "subtitle", mode="before")
    @classmethod
    def _blank_text(cls, v: Any) -> str:
        return blank_if_none(v)

    @field_validator("background_images", mode="before")
    @classmethod
    def _null_images(cls, v: Any) -> Any:
        return [] if v is None else v


class PublicConfig(BaseModel):
    """Config as exposed to callers: image payloads replaced by URLs."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: str
    background_image_urls: list[str] = Field(alias="backgroundImageUrls")
