#!/usr/bin/env python

import logging.config

import plac

from tagcore.logging import no_datetime_config
from taggrep.console import main


logging.config.dictConfig(no_datetime_config)
plac.call(main)
