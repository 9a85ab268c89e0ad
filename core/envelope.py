"""
Result envelope returned for every tool call.

A call yields exactly one envelope: either a success carrying an ordered,
non-empty list of content items, or a failure with isError set and a single
text item explaining what went wrong. Content items are plain dicts in the
MCP wire shape so the envelope is always JSON-serializable.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from core.errors import ErrorKind

ContentItem = Dict[str, Any]

CONTENT_TYPES = ("text", "image", "resource")


def text_content(text: str) -> ContentItem:
    if not isinstance(text, str):
        raise TypeError("text content requires a string")
    return {"type": "text", "text": text}


def image_content(data: str, mime_type: str) -> ContentItem:
    if not isinstance(data, str) or not data:
        raise ValueError("image content requires base64 data")
    if not isinstance(mime_type, str) or not mime_type:
        raise ValueError("image content requires a mimeType")
    return {"type": "image", "data": data, "mimeType": mime_type}


def resource_content(
    uri: str,
    *,
    text: Optional[str] = None,
    blob: Optional[str] = None,
    mime_type: Optional[str] = None,
) -> ContentItem:
    if not isinstance(uri, str) or not uri:
        raise ValueError("resource content requires a uri")
    if (text is None) == (blob is None):
        raise ValueError("resource content requires exactly one of text or blob")

    resource: Dict[str, Any] = {"uri": uri}
    if mime_type:
        resource["mimeType"] = mime_type
    if text is not None:
        resource["text"] = text
    else:
        resource["blob"] = blob
    return {"type": "resource", "resource": resource}


def check_content_item(item: Any) -> ContentItem:
    """Make sure a handler-produced item is one of the known tagged variants."""
    if not isinstance(item, dict):
        raise TypeError(f"content item must be a dict, got {type(item).__name__}")

    kind = item.get("type")
    if kind == "text":
        return text_content(item.get("text"))
    if kind == "image":
        return image_content(item.get("data"), item.get("mimeType"))
    if kind == "resource":
        res = item.get("resource")
        if not isinstance(res, dict):
            raise ValueError("resource content requires a resource object")
        return resource_content(
            res.get("uri"),
            text=res.get("text"),
            blob=res.get("blob"),
            mime_type=res.get("mimeType"),
        )
    raise ValueError(f"unsupported content type: {kind!r}")


@dataclass(frozen=True)
class ResultEnvelope:
    content: List[ContentItem]
    is_error: bool = False
    kind: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.content:
            raise ValueError("envelope requires at least one content item")
        if self.is_error and self.kind not in ErrorKind.ALL:
            raise ValueError(f"unknown error kind: {self.kind!r}")
        if not self.is_error and self.kind is not None:
            raise ValueError("success envelopes carry no error kind")

    @classmethod
    def success(cls, content: Sequence[ContentItem]) -> "ResultEnvelope":
        return cls(content=[check_content_item(c) for c in content])

    @classmethod
    def failure(cls, kind: str, message: str) -> "ResultEnvelope":
        return cls(content=[text_content(message)], is_error=True, kind=kind)

    @property
    def text(self) -> str:
        return "\n".join(c["text"] for c in self.content if c["type"] == "text")

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"content": copy.deepcopy(self.content)}
        if self.is_error:
            out["isError"] = True
        return out
