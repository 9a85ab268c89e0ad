import os


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


# --- Service identity ---
SERVICE_NAME = env("SERVICE_NAME", "local-dev-mcp-server")
VERSION = env("VERSION", "1.0.0")

# --- Transport ---
# stdio is what MCP desktop clients spawn; http serves FastAPI + streamable HTTP.
MCP_TRANSPORT = (env("MCP_TRANSPORT", "stdio") or "stdio").lower()
MCP_HOST = env("MCP_HOST", "127.0.0.1")
MCP_PORT = int(env("MCP_PORT", "8000"))
MCP_HTTP_PATH = env("MCP_HTTP_PATH", "/mcp")

# --- Logging ---
LOG_LEVEL = (env("LOG_LEVEL", "INFO") or "INFO").upper()
LOG_FILE = env("LOG_FILE")
