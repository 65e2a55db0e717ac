import logging, json, sys, time, os

ROOT_LOGGER = "appseed"


def _level(value, default=logging.INFO):
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).upper())
    return level if isinstance(level, int) else default


def _configure(logger, to_file=None):
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt=json.dumps({
            "ts": "%(asctime)s",
            "level": "%(levelname)s",
            "name": "%(name)s",
            "msg": "%(message)s"
        }),
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    formatter.converter = time.gmtime  # UTC timestamps
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if to_file:
        os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(to_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def get_logger(name=ROOT_LOGGER, level=None, to_file=None):
    """
    Structured JSON-line logger for appseed components.

    Handlers live on the "appseed" logger only; "appseed.*" children propagate
    to it, so setting the root level (e.g. from the CLI) applies everywhere.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(_level(os.getenv("APPSEED_LOG_LEVEL", "INFO")))
        _configure(root, to_file)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_level(level))
    return logger
