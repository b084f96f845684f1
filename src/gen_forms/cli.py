"""
Gen-Forms command line entry point.

Usage:
    # MCP server for desktop clients (stdio)
    gen-forms mcp --transport stdio

    # MCP server for Docker/remote (SSE)
    gen-forms mcp --transport sse --port 8080

    # HTTP RPC server
    gen-forms http --port 2022

    # Gradio UI
    gen-forms ui --port 7860

    # Preview the fields detected in a description
    gen-forms parse "Contact form with name, email and phone"

    # Create the database tables
    gen-forms init-db
"""

import argparse
import asyncio
import json
import sys

from gen_forms.analyzer import parse_form_description
from gen_forms.config import get_config
from gen_forms.errors import GenFormsError
from gen_forms.logging_setup import setup_logging

EPILOG = """
Environment Variables:
  GEN_FORMS_STORE          Store backend: sql or memory (default: sql)
  DATABASE_URL             SQLAlchemy async URL (default: sqlite+aiosqlite:///./gen_forms.db)
  GEN_FORMS_VALIDATE_SUBMISSIONS
                           Reject submissions that break field rules (default: false)
  MCP_TRANSPORT            Transport type: stdio or sse (default: stdio)
  MCP_PORT                 Port for SSE transport (default: 8080)
  GEN_FORMS_HTTP_PORT      Port for the RPC server (default: 2022)
  GEN_FORMS_UI_PORT        Port for the UI (default: 7860)
  GEN_FORMS_API_URL        RPC server the UI talks to (default: local store)
  GEN_FORMS_LOG_LEVEL      Log level (default: INFO)
  GEN_FORMS_LOG_FILE       Also append logs to this file
"""


def _banner(title: str, **details) -> None:
    # stdout belongs to the MCP stdio transport
    print("=" * 60, file=sys.stderr)
    print(title, file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    for key, value in details.items():
        print(f"{key}: {value}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="gen-forms",
        description="Gen-Forms: build forms from plain-text descriptions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=config.verbose_output,
        help="Log at DEBUG level with module and line numbers",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    mcp = subparsers.add_parser("mcp", help="Run the MCP server")
    mcp.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )
    mcp.add_argument("--host", default="0.0.0.0", help="Host for SSE transport (default: 0.0.0.0)")
    mcp.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    http = subparsers.add_parser("http", help="Run the HTTP RPC server")
    http.add_argument("--host", default="0.0.0.0")
    http.add_argument("--port", type=int, default=config.http_port)

    ui = subparsers.add_parser("ui", help="Run the Gradio UI")
    ui.add_argument("--host", default="0.0.0.0")
    ui.add_argument("--port", type=int, default=config.ui_port)

    parse = subparsers.add_parser("parse", help="Print the form detected in a description")
    parse.add_argument("description", help="Plain-text form description")

    subparsers.add_parser("init-db", help="Create the database tables")

    return parser


async def _init_db() -> None:
    from gen_forms.store import create_store

    store = create_store(get_config())
    try:
        await store.initialize()
    finally:
        await store.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = get_config()

    setup_logging(
        verbose=args.verbose,
        file_path=config.log_file,
        level=config.log_level,
    )

    try:
        if args.command == "mcp":
            from gen_forms.mcp_server import run_mcp_server

            details = {"Transport": args.transport, "Store": config.store_backend}
            if args.transport == "sse":
                details.update(Host=args.host, Port=args.port)
            _banner("Gen-Forms MCP Server", **details)
            asyncio.run(run_mcp_server(transport=args.transport, host=args.host, port=args.port))

        elif args.command == "http":
            from gen_forms.http_server import run_http_server

            _banner("Gen-Forms RPC Server", Host=args.host, Port=args.port, Store=config.store_backend)
            run_http_server(host=args.host, port=args.port)

        elif args.command == "ui":
            from gen_forms.ui.app import launch_ui

            launch_ui(host=args.host, port=args.port)

        elif args.command == "parse":
            parsed = parse_form_description(args.description)
            print(json.dumps(parsed.model_dump(mode="json"), indent=2))

        elif args.command == "init-db":
            asyncio.run(_init_db())
            print(f"Tables ready at {config.database_url}")

    except KeyboardInterrupt:
        print("\nServer stopped.", file=sys.stderr)
    except GenFormsError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
