from urllib.parse import quote

BASE_URL = "https://www.goodreads.com"


def search_url(query: str) -> str:
    return f"{BASE_URL}/search?q={quote(query, safe='')}"


def quotes_page_url(work_id: str, page: int) -> str:
    return f"{BASE_URL}/work/quotes/{quote(str(work_id), safe='')}?page={int(page)}"
