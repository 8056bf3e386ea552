import argparse
import asyncio
import logging

from .server import HostConfig, HostServer


def main() -> None:
    parser = argparse.ArgumentParser(description="Showdown hand evaluation host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8766)
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, etc.).")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    server = HostServer(HostConfig(host=args.host, port=args.port))
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
