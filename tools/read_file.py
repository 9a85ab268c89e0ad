from pathlib import Path

from core.envelope import resource_content, text_content
from core.io_utils import read_text

TOOL_NAME = "read-file"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Read contents of a file from the local filesystem",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Absolute or relative path to the file"}
        },
        "required": ["path"],
    },
}


def run(args: dict, ctx) -> list:
    path = args["path"]
    content = read_text(path)
    return [
        text_content(f"File: {path}"),
        resource_content(Path(path).resolve().as_uri(), text=content, mime_type="text/plain"),
    ]
