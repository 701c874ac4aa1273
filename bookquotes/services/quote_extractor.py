"""Turn fetched catalog and quotes pages into structured records."""
import logging
import re
from typing import List, Union

from bookquotes.domain import PageResult, ScrapedQuote, SearchHit
from bookquotes.services.document import Document, parse_html
from bookquotes.services.text_normalizer import normalize

logger = logging.getLogger(__name__)

SEARCH_ROW_SELECTOR = 'tr[itemtype="http://schema.org/Book"]'
QUOTE_BLOCK_SELECTOR = ".quoteDetails"
PAGINATION_LINK_SELECTOR = 'a[href*="page="]'
NEXT_PAGE_SELECTOR = ".next_page"
TAG_LINK_SELECTOR = ".greyText.smallText.left a"

_WORK_ID = re.compile(r"/work/editions/(\d+)")
_COVER_SIZE = re.compile(r"\._S[XY]\d+_")
_COVER_SIZE_OR_CROP = re.compile(r"\._(S[XY]\d+|CR\d+,\d+,\d+,\d+)_")
_LIKES = re.compile(r"([\d,]+)\s*likes?")
_PAGE_PARAM = re.compile(r"page=(\d+)")
_TRAILING_COMMA = re.compile(r",\s*$")


def _as_document(doc: Union[Document, str]) -> Document:
    if isinstance(doc, str):
        return parse_html(doc)
    return doc


def _joined_text(el, selector: str) -> str:
    return "".join(found.text() for found in el.find_all(selector)).strip()


def upgrade_cover_url(url: str) -> str:
    """Strip thumbnail size/crop tokens so the URL points at the full-size cover."""
    if not url:
        return url
    url = _COVER_SIZE.sub("", url, count=1)
    return _COVER_SIZE_OR_CROP.sub("", url, count=1)


def parse_likes(label: str) -> int:
    m = _LIKES.search(label or "")
    if not m:
        return 0
    digits = m.group(1).replace(",", "")
    try:
        return int(digits)
    except ValueError:
        return 0


def extract_search_hits(doc: Union[Document, str], limit: int = 10) -> List[SearchHit]:
    """Collect up to `limit` book rows from a catalog search page.

    Rows without a title or a work id are skipped and don't count towards
    `limit`. Rows after the `limit`-th hit are never looked at.
    """
    doc = _as_document(doc)
    hits: List[SearchHit] = []
    if limit <= 0:
        return hits

    for row in doc.find_all(SEARCH_ROW_SELECTOR):
        title = _joined_text(row, "a.bookTitle span")
        author = _joined_text(row, "a.authorName span")
        img = row.find("img.bookCover")
        cover = (img.attr("src") if img is not None else None) or ""

        editions = row.find('a[href*="/work/editions/"]')
        href = (editions.attr("href") if editions is not None else None) or ""
        m = _WORK_ID.search(href)
        work_id = m.group(1) if m else ""

        if not title or not work_id:
            logger.debug("Skipping search row without title or work id (title=%r)", title)
            continue

        hits.append(SearchHit(title=title, author=author, cover_image_url=upgrade_cover_url(cover), work_id=work_id))
        if len(hits) >= limit:
            break
    return hits


def _extract_quote(block, page_number: int):
    quote_text_el = block.find(".quoteText")
    if quote_text_el is None:
        return None

    text = normalize(quote_text_el.own_text())
    if not text:
        return None

    author_el = quote_text_el.find(".authorOrTitle")
    author = _TRAILING_COMMA.sub("", author_el.text()).strip() if author_el is not None else ""

    likes_el = block.find(".right .smallText")
    likes_count = parse_likes(likes_el.text().strip()) if likes_el is not None else 0

    tags = []
    for a in block.find_all(TAG_LINK_SELECTOR):
        tag = a.text().strip()
        if tag:
            tags.append(tag)

    return ScrapedQuote(
        text=text,
        author=author,
        likes_count=likes_count,
        tags=tags,
        page_number=page_number,
    )


def estimate_total_pages(doc: Document, page_number: int) -> int:
    """Largest page number linked from the pagination widget, at least 1.

    When there is no usable "next" control the current page is treated as a
    floor, so a missing widget can't undercount.
    """
    total = 1
    for link in doc.find_all(PAGINATION_LINK_SELECTOR):
        m = _PAGE_PARAM.search(link.attr("href") or "")
        if m:
            total = max(total, int(m.group(1)))

    next_link = doc.find(NEXT_PAGE_SELECTOR)
    if next_link is None or next_link.has_class("disabled"):
        total = max(total, page_number)
    return total


def extract_quotes_page(doc: Union[Document, str], page_number: int) -> PageResult:
    doc = _as_document(doc)
    quotes: List[ScrapedQuote] = []
    for block in doc.find_all(QUOTE_BLOCK_SELECTOR):
        quote = _extract_quote(block, page_number)
        if quote is not None:
            quotes.append(quote)
    return PageResult(quotes=quotes, total_pages=estimate_total_pages(doc, page_number))
