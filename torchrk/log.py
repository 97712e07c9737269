import logging
import os

package_logger = logging.getLogger("torchrk")
default_stream_handler = logging.StreamHandler()
default_formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

# logging.DEBUG == 10 shows one line per integration step, logging.INFO == 20 one line
# per run
LOG_LEVEL_ENV = "TORCHRK_LOG_LEVEL"


def parse_log_level(value: str) -> int:
    """Parse a level name such as `"debug"` or a number such as `"10"`."""
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {value!r}")
    return level


def env_log_level(default=logging.WARNING):
    value = os.environ.get(LOG_LEVEL_ENV)
    if value is None:
        return default
    return parse_log_level(value)


def init_log(level=logging.WARNING):
    package_logger.setLevel(level)

    default_stream_handler.setLevel(logging.DEBUG)

    default_stream_handler.setFormatter(default_formatter)

    if default_stream_handler not in package_logger.handlers:
        package_logger.addHandler(default_stream_handler)
