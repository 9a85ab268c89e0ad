TOOL_NAME = "create-task"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Create a new task or issue",
    "inputSchema": {
        "type": "object",
        "properties": {
            "title": {"type": "string", "description": "Task title", "minLength": 1},
            "description": {"type": "string", "description": "Detailed task description"},
            "priority": {
                "type": "string",
                "enum": ["low", "medium", "high"],
                "description": "Task priority",
                "default": "medium",
            },
        },
        "required": ["title", "description"],
    },
}


def run(args: dict, ctx) -> str:
    task = ctx.tasks.create(args["title"], args["description"], args.get("priority", "medium"))
    return (
        "Task created successfully!\n\n"
        f"ID: {task.id}\n"
        f"Title: {task.title}\n"
        f"Status: {task.status}\n"
        f"Priority: {task.priority}"
    )
