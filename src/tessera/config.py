from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TesseraConfig:
    class_prefix: str = "tc"  # must start with a letter
    dynamic_prefix: str = "--tc-d"
    placeholder: str = "&"  # stands for ".<class>" in selector templates
    diagnostics: bool = True  # run conflict analysis in cx/dcx
