"""
schema-form MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for desktop clients)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import logging
import sys

from schema_form.config import get_config
from schema_form.mcp_server import run_mcp_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="schema-form MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Desktop client (stdio)
  python run_mcp_server.py --transport stdio

  # Docker/Remote (SSE)
  python run_mcp_server.py --transport sse --port 8080

Environment Variables:
  MCP_TRANSPORT                Transport type: stdio or sse (default: stdio)
  MCP_PORT                     Port for SSE transport (default: 8080)
  SCHEMA_FORM_DEFAULT_METHOD   HTTP method for converted forms (default: POST)
  SCHEMA_FORM_LOG_LEVEL        Log level (default: INFO)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host for SSE transport (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    args = parser.parse_args()

    # stdout carries the stdio protocol, so logs go to stderr
    logging.basicConfig(level=config.log_level, stream=sys.stderr)
    logger = logging.getLogger("schema-form-mcp")
    logger.info(f"Transport: {args.transport}")
    if args.transport == "sse":
        logger.info(f"Listening on {args.host}:{args.port}")

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped.")
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
