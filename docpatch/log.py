# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class PatchFormatError(ValueError):
    """A patch document, operation or path that isn't well formed."""


def init_logging(level=logging.INFO):
    """Set up root logging for the docpatch command line apps.

    Messages are prefixed with their level initial and origin,
    e.g. "[D patching:88] ...".
    """
    logging.basicConfig(
        format='[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s',
        level=level)
    logging.captureWarnings(True)


def set_docpatch_log_level(level, set_main=True):
    """Set the level of the docpatch logger, and of the root logger
    as well unless set_main is false."""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('docpatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
