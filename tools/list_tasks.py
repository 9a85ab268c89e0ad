TOOL_NAME = "list-tasks"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "List all tasks, optionally filtered by status",
    "inputSchema": {
        "type": "object",
        "properties": {
            "status": {
                "type": "string",
                "enum": ["todo", "in-progress", "done", "all"],
                "description": "Filter by status",
            }
        },
    },
}


def run(args: dict, ctx) -> str:
    tasks = ctx.tasks.list(args.get("status"))
    if not tasks:
        return "No tasks found."

    entries = [
        f"[{t.id}] {t.title}\n  Status: {t.status} | Priority: {t.priority}\n  {t.description}"
        for t in tasks
    ]
    return f"Tasks ({len(tasks)}):\n\n" + "\n\n".join(entries)
