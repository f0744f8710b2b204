from __future__ import annotations

import logging
import sys

import envload
from envload.logging import init_logging
from envload.settings import LoggingSettings


def main() -> int:
    env = envload.new().prefix("APP_")
    init_logging(LoggingSettings.from_loader(env))

    host = envload.Slot[str]()
    port = envload.Slot[int]()
    debug = envload.Slot[bool]()
    env.optional_string("HOST", host, "127.0.0.1", "hostname to bind")
    env.optional_int("PORT", port, 8080, "port number")
    env.flag("DEBUG", debug, "enable debug mode")

    logger = logging.getLogger("smoke")
    try:
        env.load()
    except envload.LoadError as e:
        logger.error("smoke.config_invalid error=%s", e)
        sys.stderr.write(env.help())
        return 1

    logger.info("smoke.config_loaded host=%s port=%s debug=%s", host.value, port.value, debug.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
