from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


FREEGROWTH_LOG_LEVEL = os.environ.get("FREEGROWTH_LOG_LEVEL", "WARNING")


@dataclass(frozen=True)
class GrowthOptions:
    num_levels: int
    include_inverses: bool = True
    table_format: str = "html"
    html_out: Optional[str] = None
    show_table: bool = True
