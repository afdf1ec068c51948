import logging.config

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            # stdout carries rendered output
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "cmsfields": {
            "handlers": ["console"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def setup(verbose=False):
    config = dict(LOGGING_CONFIG)
    config["handlers"] = {
        name: dict(handler) for name, handler in LOGGING_CONFIG["handlers"].items()
    }
    if verbose:
        config["handlers"]["console"]["level"] = logging.DEBUG

    logging.config.dictConfig(config)
