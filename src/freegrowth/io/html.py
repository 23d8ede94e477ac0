from __future__ import annotations

import logging
import os
from typing import Iterable, Union

from freegrowth.calculate import parse_words
from freegrowth.table.cayley import CayleyTable

logger = logging.getLogger(__name__)

HTML_HEADER = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Cayley table</title>
<style>
table { border-collapse: collapse; }
th, td { border: 1px solid #999; padding: 0.25em 0.5em; text-align: center; }
</style>
</head>
<body>"""

HTML_FOOTER = """</body>
</html>"""


def html_page(body: str) -> str:
    return f"{HTML_HEADER}\n{body}\n{HTML_FOOTER}\n"


def write_html_table(generators: Iterable[str], path: Union[str, os.PathLike]) -> str:
    """
    Write a standalone HTML page holding the Cayley table of *generators*
    (inverses included).  Returns the path written.
    """
    words = parse_words(generators, include_inverses=True)
    page = html_page(CayleyTable.symmetric(words).to_html())
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(page)
    except OSError:
        logger.error("could not write Cayley table to %s", path)
        raise
    logger.info("wrote Cayley table to %s", path)
    return os.fspath(path)
