import importlib

# Declaration order; tools/list reports them in exactly this order.
TOOL_MODULES = (
    "read_file",
    "write_file",
    "list_directory",
    "create_task",
    "list_tasks",
    "update_task_status",
    "generate_markdown_doc",
    "generate_readme",
)


def load_tools(modules=TOOL_MODULES):
    """
    Import the tool modules inside the tools/ package.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool schema)
      - run(args: dict, ctx: ToolContext) -> str | list of content items
    Returns (runners, specs), both keyed by tool name in declaration order.
    """
    package_name = __name__.rsplit(".", 1)[0]  # "tools"

    runners = {}
    specs = {}

    for name in modules:
        m = importlib.import_module(f"{package_name}.{name}")

        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not callable(runner):
            raise ImportError(f"{m.__name__} is not a tool module (needs TOOL_NAME, TOOL_SPEC, run)")
        if tool_spec.get("name") != tool_name:
            raise ImportError(f"{m.__name__}: TOOL_SPEC name does not match TOOL_NAME {tool_name!r}")
        if tool_name in runners:
            raise ImportError(f"duplicate tool name {tool_name!r} in {m.__name__}")

        runners[tool_name] = runner
        specs[tool_name] = tool_spec

    return runners, specs
