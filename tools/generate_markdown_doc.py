TOOL_NAME = "generate-markdown-doc"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Generate a markdown document with specified structure",
    "inputSchema": {
        "type": "object",
        "properties": {
            "title": {"type": "string", "description": "Document title"},
            "sections": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "heading": {"type": "string"},
                        "content": {"type": "string"},
                    },
                    "required": ["heading", "content"],
                },
                "description": "Sections with headings and content",
            },
        },
        "required": ["title", "sections"],
    },
}


def render(title: str, sections: list) -> str:
    parts = [f"# {title}\n\n"]
    for section in sections:
        parts.append(f"## {section['heading']}\n\n{section['content']}\n\n")
    return "".join(parts)


def run(args: dict, ctx) -> str:
    return render(args["title"], args["sections"])
