TOOL_NAME = "update-task-status"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Update the status of a task",
    "inputSchema": {
        "type": "object",
        "properties": {
            "taskId": {"type": "string", "description": "Task ID"},
            "status": {
                "type": "string",
                "enum": ["todo", "in-progress", "done"],
                "description": "New status",
            },
        },
        "required": ["taskId", "status"],
    },
}


# Any status may follow any other (done -> todo is fine); TaskNotFoundError
# for an unknown id becomes a NotFound envelope in the dispatcher.
def run(args: dict, ctx) -> str:
    task = ctx.tasks.update_status(args["taskId"], args["status"])
    return f"Task {task.id} status updated to: {task.status}"
