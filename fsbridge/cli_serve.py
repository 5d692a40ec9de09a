import argparse
from urllib.parse import urlsplit

import uvicorn

from fsbridge.config.settings import settings
from fsbridge.exceptions import ConfigurationError


def parse_urls(urls: str, default_port: int) -> tuple[str, int]:
    """Split an ``--urls`` value such as ``http://localhost:50000`` into host and port."""
    # Several URLs may be given separated by ';'; only the first is bound
    first = urls.split(";")[0].strip()
    parts = urlsplit(first)
    if parts.scheme not in {"http", "https"} or not parts.hostname:
        raise ConfigurationError(f"Invalid --urls value: {urls!r}")
    try:
        port = parts.port
    except ValueError:
        raise ConfigurationError(f"Invalid port in --urls value: {urls!r}")
    return parts.hostname, port or default_port


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fsbridge-serve",
        description="Serve the filesystem commands over HTTP.",
    )
    parser.add_argument(
        "--urls",
        default=None,
        help="URL to listen on, e.g. http://localhost:50000 (default: HOST/PORT)",
    )
    parser.add_argument(
        "--reload",
        action=argparse.BooleanOptionalAction,
        default=settings.reload,
        help="Enable or disable auto-reload (default: RELOAD)",
    )
    args = parser.parse_args(argv)

    host, port = settings.host, settings.port
    if args.urls:
        try:
            host, port = parse_urls(args.urls, settings.port)
        except ConfigurationError as e:
            parser.error(str(e))

    uvicorn.run("fsbridge.main:app", host=host, port=port, reload=args.reload)  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
