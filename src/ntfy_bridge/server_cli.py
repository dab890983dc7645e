"""CLI entry point for the ntfy-bridge server."""

import argparse


def main(argv: list[str] | None = None) -> None:
    from ntfy_bridge.config import get_settings

    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ntfy-bridge",
        description="Relay Alertmanager webhooks to an ntfy server",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--ntfy-server", default=None, help=f"ntfy base URL (default: {settings.ntfy_url})")
    args = parser.parse_args(argv)

    updates = {"host": args.host, "port": args.port}
    if args.ntfy_server:
        updates["ntfy_server"] = args.ntfy_server
    settings = settings.model_copy(update=updates)

    import uvicorn

    from ntfy_bridge.main import create_app

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
