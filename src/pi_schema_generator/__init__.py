"""JSON Schema generator for pi coding agent configuration files."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
