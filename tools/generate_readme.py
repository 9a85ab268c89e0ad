TOOL_NAME = "generate-readme"

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": "Generate a README.md template for a project",
    "inputSchema": {
        "type": "object",
        "properties": {
            "projectName": {"type": "string", "description": "Project name"},
            "description": {"type": "string", "description": "Project description"},
            "features": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Key features",
            },
        },
        "required": ["projectName", "description"],
    },
}


def render(project_name: str, description: str, features: list | None = None) -> str:
    readme = f"# {project_name}\n\n{description}\n\n"

    if features:
        readme += "## Features\n\n"
        readme += "".join(f"- {feature}\n" for feature in features)
        readme += "\n"

    readme += "## Installation\n\n```bash\n# Add installation instructions here\n```\n\n"
    readme += "## Usage\n\n```bash\n# Add usage instructions here\n```\n\n"
    readme += "## License\n\nMIT\n"
    return readme


def run(args: dict, ctx) -> str:
    return render(args["projectName"], args["description"], args.get("features"))
