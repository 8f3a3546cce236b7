"""Pydantic request bodies for API endpoints."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from navportal.models import blank_if_none


class LoginBody(BaseModel):
    username: str
    password: str


class UpdateConfigBody(BaseModel):
    title: str = ""
    subtitle: str = Field(default="", validation_alias=AliasChoices("subtitle", "chineseTitle"))
    reset_background: bool = Field(
        default=False, validation_alias=AliasChoices("resetBackground", "reset_background")
    )

    @field_validator("title", "subtitle", mode="before")
    @classmethod
    def _blank_text(cls, v: Any) -> str:
        return blank_if_none(v)

    @field_validator("reset_background", mode="before")
    @classmethod
    def _truthy(cls, v: Any) -> bool:
        return bool(v)


class DeleteBackgroundBody(BaseModel):
    index: Any = None
