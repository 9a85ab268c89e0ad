from core.io_utils import write_text

TOOL_NAME = "write-file"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Write content to a file, creating directories if needed",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Path to the file"},
            "content": {"type": "string", "description": "Content to write to the file"},
        },
        "required": ["path", "content"],
    },
}


def run(args: dict, ctx) -> str:
    write_text(args["path"], args["content"])
    return f"Successfully wrote to {args['path']}"
