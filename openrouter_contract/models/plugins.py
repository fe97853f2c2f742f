"""
Plugin Models - request-time capabilities activated per call.

Each plugin entry is discriminated on ``id``.

Reference:
- https://openrouter.ai/docs/features/web-search
- https://openrouter.ai/docs/features/multimodal/pdfs
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from openrouter_contract.models.base import RequestModel

PdfEngine = Literal["mistral-ocr", "pdf-text", "native"]
WebSearchEngine = Literal["exa", "native"]


class PdfOptions(RequestModel):
    engine: PdfEngine


class FileParserPlugin(RequestModel):
    """Parse attached files; ``pdf.engine`` picks the PDF handler."""

    tag_field = "id"

    id: Literal["file-parser"] = "file-parser"
    pdf: PdfOptions


class WebPlugin(RequestModel):
    """
    Augment the prompt with web search results.

    Attributes:
        engine: Search engine; provider default when absent.
        max_results: Number of results to include.
        search_prompt: Template used to inject the results.
    """

    tag_field = "id"

    id: Literal["web"] = "web"
    engine: Optional[WebSearchEngine] = None
    max_results: int
    search_prompt: str


class ResponseHealingPlugin(RequestModel):
    """Repair malformed structured output. Takes no parameters."""

    tag_field = "id"

    id: Literal["response-healing"] = "response-healing"


Plugin = Annotated[
    Union[FileParserPlugin, WebPlugin, ResponseHealingPlugin],
    Field(discriminator="id"),
]
