import logging
from datetime import datetime, timezone
from typing import Any, Dict

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import EmbeddedResource, ImageContent, TextContent

from core.config import MCP_HOST, MCP_HTTP_PATH, MCP_PORT, MCP_TRANSPORT, SERVICE_NAME, VERSION
from core.dispatcher import Dispatcher
from core.logs import setup_logging
from core.task_store import TaskStore
from tools import build_dispatcher

logger = logging.getLogger(__name__)


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


# -----------------------------
# MCP bridge
# -----------------------------
_MCP_CONTENT = {
    "text": TextContent,
    "image": ImageContent,
    "resource": EmbeddedResource,
}


def to_mcp_content(item: Dict[str, Any]):
    return _MCP_CONTENT[item["type"]].model_validate(item)


def build_mcp(dispatcher: Dispatcher) -> FastMCP:
    """Expose every registered tool through FastMCP, routed to the dispatcher."""
    server = FastMCP(name=SERVICE_NAME)

    class DispatchedTool(Tool):
        # parameters holds the registry schema verbatim; the dispatcher validates.
        async def run(self, arguments: Dict[str, Any]) -> ToolResult:
            envelope = dispatcher.call(self.name, arguments)
            if envelope.is_error:
                raise ToolError(envelope.text)
            return ToolResult(content=[to_mcp_content(c) for c in envelope.content])

    for descriptor in dispatcher.registry.list():
        server.add_tool(
            DispatchedTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.to_dict()["inputSchema"],
            )
        )
    return server


# Process-wide singletons, built once at startup.
store = TaskStore()
dispatcher = build_dispatcher(store)
mcp = build_mcp(dispatcher)

# -----------------------------
# FastAPI (health + CORS) with MCP over streamable HTTP
# -----------------------------
mcp_http = mcp.http_app(path=MCP_HTTP_PATH)

app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_http.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {
        "ok": True,
        "message": "Local dev MCP server alive",
        "service": SERVICE_NAME,
        "version": VERSION,
        "ts": utc_iso(),
        "tools": list(dispatcher.registry.names()),
        "mcp_http": MCP_HTTP_PATH,
    }


@app.get("/health")
def health():
    return {"ok": True, "ts": utc_iso(), "service": SERVICE_NAME, "version": VERSION}


# Mounted last so the routes above win.
app.mount("/", mcp_http)


def main() -> None:
    setup_logging()
    logger.info("%s %s starting (transport=%s, tools=%d)", SERVICE_NAME, VERSION, MCP_TRANSPORT, len(dispatcher.registry))

    if MCP_TRANSPORT == "stdio":
        mcp.run(transport="stdio")
    elif MCP_TRANSPORT == "http":
        uvicorn.run(app, host=MCP_HOST, port=MCP_PORT)
    else:
        raise SystemExit(f"Unsupported MCP_TRANSPORT: {MCP_TRANSPORT!r} (expected 'stdio' or 'http')")


if __name__ == "__main__":
    main()
