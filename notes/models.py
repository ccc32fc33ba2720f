"""Pydantic models for notes and their color tags."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any, Union
from uuid import uuid4

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    Tag,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

from .colors import BLACK, RGB, ColorTag, parse_hex


def _now() -> datetime:
    return datetime.now(UTC)


class TagColor(BaseModel):
    """One of the preset tags. Never carries a hex payload."""

    model_config = ConfigDict(frozen=True)

    tag: ColorTag = ColorTag.NONE

    @field_validator("tag")
    @classmethod
    def _not_custom(cls, value: ColorTag) -> ColorTag:
        if value is ColorTag.CUSTOM:
            raise ValueError("custom colors must use CustomColor")
        return value

    @property
    def rgb(self) -> RGB | None:
        return self.tag.rgb


class CustomColor(BaseModel):
    """A user-picked color stored as ``RRGGBB`` hex."""

    model_config = ConfigDict(frozen=True)

    tag: ColorTag = ColorTag.CUSTOM
    hex: str | None = None

    @field_validator("tag")
    @classmethod
    def _is_custom(cls, value: ColorTag) -> ColorTag:
        if value is not ColorTag.CUSTOM:
            raise ValueError("CustomColor tag must be 'custom'")
        return value

    @property
    def rgb(self) -> RGB:
        """Decoded hex, or black when the hex is missing or malformed."""
        return parse_hex(self.hex) or BLACK


def _color_kind(value: Any) -> str:
    tag = value.get("tag") if isinstance(value, dict) else getattr(value, "tag", None)
    return "custom" if tag == ColorTag.CUSTOM else "preset"


NoteColor = Annotated[
    Union[
        Annotated[TagColor, Tag("preset")],
        Annotated[CustomColor, Tag("custom")],
    ],
    Discriminator(_color_kind),
]


def make_color(tag: ColorTag | str, hex: str | None = None) -> TagColor | CustomColor:
    """Build the color variant for ``tag``. ``hex`` is dropped for preset tags."""
    tag = ColorTag(tag)
    if tag is ColorTag.CUSTOM:
        return CustomColor(hex=hex)
    return TagColor(tag=tag)


def resolve_color(color: TagColor | CustomColor) -> RGB | None:
    """The color to render, None meaning transparent."""
    return color.rgb


class Note(BaseModel):
    """A single user-authored note.

    Serialized with camelCase keys and a flat ``colorTag`` /
    ``customColorHex`` pair, which is the persisted blob format.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = ""
    content: str = ""
    location: str = ""
    date_created: AwareDatetime = Field(default_factory=_now)
    date_modified: AwareDatetime = Field(default_factory=_now)
    date: AwareDatetime = Field(
        default_factory=_now, description="User-chosen date the note refers to"
    )
    color: NoteColor = Field(default_factory=TagColor)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)

        tag = data.pop("colorTag", None)
        tag = data.pop("color_tag", tag)
        hex_value = data.pop("customColorHex", None)
        hex_value = data.pop("custom_color_hex", hex_value)
        if tag is not None:
            if "color" in data:
                raise ValueError("pass either color or colorTag, not both")
            if tag == ColorTag.CUSTOM:
                data["color"] = {"tag": tag, "hex": hex_value}
            else:
                data["color"] = {"tag": tag}

        # A fresh note starts with both timestamps on the same instant.
        created_key = "dateCreated" if "dateCreated" in data else "date_created"
        if created_key not in data:
            data[created_key] = _now()
        if "dateModified" not in data and "date_modified" not in data:
            data["date_modified"] = data[created_key]
        return data

    @model_validator(mode="after")
    def _check_timestamps(self) -> Note:
        if self.date_modified < self.date_created:
            raise ValueError("dateModified must not precede dateCreated")
        return self

    @model_serializer(mode="wrap")
    def _to_wire(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        data.pop("color", None)
        if info.by_alias:
            data["colorTag"] = self.color_tag.value
            data["customColorHex"] = self.custom_color_hex
        else:
            data["color_tag"] = self.color_tag.value
            data["custom_color_hex"] = self.custom_color_hex
        return data

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def color_tag(self) -> ColorTag:
        return self.color.tag

    @property
    def custom_color_hex(self) -> str | None:
        return self.color.hex if isinstance(self.color, CustomColor) else None

    @property
    def display_color(self) -> RGB | None:
        return resolve_color(self.color)

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"

    @property
    def was_modified(self) -> bool:
        return self.date_modified != self.date_created

    def edited(
        self,
        *,
        title: str,
        content: str,
        location: str,
        date: datetime,
        color: TagColor | CustomColor,
    ) -> Note:
        """Return a copy with every editable field replaced.

        ``id`` and ``date_created`` are kept; ``date_modified`` moves to now.
        """
        return type(self)(
            id=self.id,
            title=title,
            content=content,
            location=location,
            date_created=self.date_created,
            date_modified=max(_now(), self.date_modified),
            date=date,
            color=color,
        )
