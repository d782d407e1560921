import logging

__all__ = ["log", "set_up_logging", "LOG_FORMAT"]

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] - %(message)s"

log = logging.getLogger("range_header")  # Provided for ease of access in other modules
log.addHandler(logging.NullHandler())


def set_up_logging(quiet: bool = True, level: int = logging.DEBUG) -> logging.Logger:
    """
    Initialise the log. Headers rejected by the tokenizer and range specs dropped
    by the normalizer are reported at DEBUG level.

    Calling this more than once does not stack up console handlers.

    Args:
      quiet : Change this flag to True/False to turn off/on console logging
      level : The level to set on the package logger (and its console handler)
    """
    log.setLevel(level)
    consoles = [h for h in log.handlers if getattr(h, "_range_header_console", False)]
    if quiet:
        for console in consoles:
            log.removeHandler(console)
    elif not consoles:
        console = logging.StreamHandler()
        console._range_header_console = True
        console.setLevel(level)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(console)
    else:
        for console in consoles:
            console.setLevel(level)
    return log
