from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ScrapedQuote:
    text: str
    author: str
    likes_count: int = 0
    tags: List[str] = field(default_factory=list)
    page_number: int = 1
