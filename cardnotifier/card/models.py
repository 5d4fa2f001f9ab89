"""Wire models for the connector ``MessageCard`` payload.

Python attribute names are snake_case; the JSON keys expected by the
webhook are declared as aliases, so cards must be dumped with
``by_alias=True``.
"""

from pydantic import BaseModel, ConfigDict, Field

CARD_TYPE = "MessageCard"
CARD_CONTEXT = "https://schema.org/extension"
CARD_SUMMARY = "Result of Bitrise"


class _CardModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Fact(_CardModel):
    """One ``name: value`` row of a section."""

    name: str
    value: str


class Image(_CardModel):
    """An image shown inside a section."""

    image: str


class ActionTarget(_CardModel):
    os: str = "default"
    uri: str


class OpenUriAction(_CardModel):
    """A button that opens *targets* in the browser."""

    type: str = Field(default="OpenUri", alias="@type")
    name: str
    targets: list[ActionTarget]


class Section(_CardModel):
    activity_title: str = Field(default="", alias="activityTitle")
    activity_text: str = Field(default="", alias="activityText")
    facts: list[Fact] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    potential_action: list[OpenUriAction] = Field(
        default_factory=list, alias="potentialAction"
    )


class StatusCard(_CardModel):
    """The complete payload posted to the webhook.

    Attributes:
        theme_color: Accent color (hex without ``#`` or a color name).
        title: Card title.
        sections: Always exactly one :class:`Section`.
    """

    type: str = Field(default=CARD_TYPE, alias="@type")
    context: str = Field(default=CARD_CONTEXT, alias="@context")
    theme_color: str = Field(default="", alias="themeColor")
    title: str = ""
    summary: str = CARD_SUMMARY
    sections: list[Section] = Field(default_factory=list)
