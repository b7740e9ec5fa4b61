from __future__ import annotations

import argparse
import logging

from .runtime.server import run


def main() -> None:
    p = argparse.ArgumentParser(prog="jamal", description="jamal: drawing app backend")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--data-dir", default=None, help="directory holding recent_files.json")
    p.add_argument("--log-level", default=None)
    args = p.parse_args()

    logging.basicConfig(level=(args.log_level or "INFO").upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    srv = run(host=args.host, port=args.port, data_dir=args.data_dir, log_level=args.log_level)
    print(getattr(srv, "url", None) or getattr(srv, "base_url", ""))

    # Block forever (so it behaves like a normal CLI server)
    import time

    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
