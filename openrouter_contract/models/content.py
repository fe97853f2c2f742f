"""
Message Models - conversational turns and multimodal content parts.

A message's content is either plain text or an ordered list of typed content
parts. The part union is discriminated on ``type`` so calling code can branch
exhaustively on it.

Reference:
- https://openrouter.ai/docs/api-reference/overview#requests
- Pattern: Pydantic discriminated unions with Field(discriminator=...)
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from openrouter_contract.models.base import RequestModel

MessageRole = Literal["system", "user", "assistant"]

InputAudioFormat = Literal[
    "wav", "mp3", "aiff", "aac", "ogg", "flac", "m4a", "pcm16", "pcm24"
]


# =============================================================================
# Text and Image Parts
# =============================================================================


class TextContent(RequestModel):
    """Plain text segment."""

    tag_field = "type"

    type: Literal["text"] = "text"
    text: str


class ImageUrl(RequestModel):
    """Image reference: an https URL or a base64 data URL."""

    url: str


class ImageUrlContent(RequestModel):
    """Image segment."""

    tag_field = "type"

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


# =============================================================================
# File Parts
# =============================================================================


class FileAttachment(RequestModel):
    """File attachment keyed as ``file_data``."""

    filename: str
    file_data: str = Field(..., description="Data URL or base64 file contents")

    @property
    def data(self) -> str:
        return self.file_data


class CamelCaseFileAttachment(RequestModel):
    """
    File attachment keyed as ``fileData``.

    Both spellings appear in the API surface and neither is documented as
    canonical, so they are kept as distinct shapes. Only the camel-case key is
    accepted here; construct with ``fileData=...``.
    """

    model_config = {"populate_by_name": False}

    filename: str
    file_data: str = Field(..., alias="fileData")

    @property
    def data(self) -> str:
        return self.file_data


class FileContent(RequestModel):
    """
    File segment.

    The snake-case attachment is tried first; whichever spelling the caller
    used is the one emitted when the message is serialized by alias.
    """

    tag_field = "type"

    type: Literal["file"] = "file"
    file: Union[FileAttachment, CamelCaseFileAttachment] = Field(
        ..., union_mode="left_to_right"
    )


# =============================================================================
# Audio and Video Parts
# =============================================================================


class InputAudio(RequestModel):
    """Base64 audio payload and its container format."""

    data: str
    format: InputAudioFormat


class InputAudioContent(RequestModel):
    """Audio segment. Wire key is ``inputAudio``."""

    tag_field = "type"

    type: Literal["input_audio"] = "input_audio"
    input_audio: InputAudio = Field(..., alias="inputAudio")


class VideoUrl(RequestModel):
    url: str


class VideoUrlContent(RequestModel):
    """Video segment. Wire key is ``videoUrl``."""

    tag_field = "type"

    type: Literal["video_url"] = "video_url"
    video_url: VideoUrl = Field(..., alias="videoUrl")


ContentPart = Annotated[
    Union[
        TextContent,
        ImageUrlContent,
        FileContent,
        InputAudioContent,
        VideoUrlContent,
    ],
    Field(discriminator="type"),
]


# =============================================================================
# Message
# =============================================================================


class Message(RequestModel):
    """
    Chat message model.

    Attributes:
        role: Message role (system, user, assistant)
        content: Plain text, or an ordered list of typed content parts

    Example:
        >>> Message(
        ...     role="user",
        ...     content=[
        ...         {"type": "text", "text": "What is in this image?"},
        ...         {"type": "image_url", "image_url": {"url": "https://x/y.png"}},
        ...     ],
        ... )
    """

    role: MessageRole
    content: Union[str, list[ContentPart]]

    @property
    def is_multimodal(self) -> bool:
        """True when content is a list of parts rather than plain text."""
        return not isinstance(self.content, str)
