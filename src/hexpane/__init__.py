"""
hexpane - terminal hex and ASCII byte editor.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
