from core.io_utils import list_dir

TOOL_NAME = "list-directory"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List contents of a directory",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Path to the directory"}
        },
        "required": ["path"],
    },
}


def run(args: dict, ctx) -> str:
    path = args["path"]
    lines = [f"{'📁' if e.is_dir else '📄'} {e.name}" for e in list_dir(path)]
    return f"Contents of {path}:\n\n" + "\n".join(lines)
