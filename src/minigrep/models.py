from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    pattern: str
    filename: str
    case_sensitive: bool = True
