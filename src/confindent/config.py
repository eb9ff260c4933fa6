"""Local configuration for confindent."""

from __future__ import annotations

import os


DEFAULT_INDENT = "\t"
DEFAULT_PATH_DELIMITER = "/"
DEFAULT_ENCODING = "utf-8"

# Indent unit written once per depth level by the serializer.
CONFINDENT_INDENT = os.getenv("CONFINDENT_INDENT", DEFAULT_INDENT)
CONFINDENT_PATH_DELIMITER = os.getenv("CONFINDENT_PATH_DELIMITER", DEFAULT_PATH_DELIMITER)
CONFINDENT_ENCODING = os.getenv("CONFINDENT_ENCODING", DEFAULT_ENCODING)
