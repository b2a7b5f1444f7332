"""
Logging presets for taggrep scripts.

Provides two predefined logging configurations default_config and
no_datetime_config, with a log level determined by the env vbl
LOG_LEVEL (default INFO).  spaCy's own loggers stay at WARNING whatever
LOG_LEVEL says, so that debugging the matcher doesn't bury its output
under pipeline chatter.
Nothing here installs a configuration; that belongs to scripts such as
the tgrep console, never to library modules, which only create loggers:
    _logger = logging.getLogger(f"{__name__}.<module>")

Typical script setup:
    import logging.config
    from tagcore.logging import no_datetime_config
    logging.config.dictConfig(no_datetime_config)
"""

from copy import deepcopy
import os


log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

default_format = '%(asctime)s %(levelname)-8s %(name)s %(funcName)s L%(lineno)d %(message)s'
no_datetime_format = '%(levelname)-8s %(name)s %(funcName)s L%(lineno)d %(message)s'

default_config = dict(
    version=1,
    # Loggers created at import time by tagcore/taggrep modules must survive.
    disable_existing_loggers=False,
    formatters={
        'f': {'format': default_format}
    },
    handlers={
        # Matches go to stdout, so logging goes to stderr.
        'h': {'class': 'logging.StreamHandler',
              'formatter': 'f',
              'stream': 'ext://sys.stderr',
             }
    },
    loggers={
        'spacy': {'level': 'WARNING'},
    },
    root={
        'handlers': ['h'],
        'level': log_level,
    },
)

# Stable output for diffing the logs of two runs over the same corpus.
no_datetime_config = deepcopy(default_config)
no_datetime_config['formatters']['f']['format'] = no_datetime_format
