from dataclasses import dataclass


@dataclass(frozen=True)
class CrawlSettings:
    """Crawl tunables, built once at startup and handed to the services that need them."""

    delay_ms: int = 1500
    timeout_ms: int = 15000
    max_pages: int = 20
    search_limit: int = 10

    @property
    def delay_seconds(self) -> float:
        return max(0, self.delay_ms) / 1000.0

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0
