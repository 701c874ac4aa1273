from pathlib import Path

from bookquotes.domain import ScrapedQuote
from bookquotes.services.document import parse_html
from bookquotes.services.quote_extractor import (
    extract_quotes_page,
    extract_search_hits,
    parse_likes,
    upgrade_cover_url,
)

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def _search_row(title, work_id=None, author="Author"):
    editions = f'<a href="/work/editions/{work_id}-slug">editions</a>' if work_id else ""
    return (
        '<tr itemtype="http://schema.org/Book">'
        f'<td><a class="bookTitle" href="/book/show/1"><span>{title}</span></a>'
        f'<a class="authorName" href="/author/show/1"><span>{author}</span></a>{editions}</td>'
        "</tr>"
    )


def test_extract_quotes_page_parses_fixture():
    result = extract_quotes_page(_fixture("quotes_page.html"), 1)

    assert result.total_pages == 12
    assert [q.text for q in result.quotes] == [
        "It is our choices, Harry, that show what we truly are, far more than our abilities.",
        "It doesn't do to dwell on dreams and forget to live.",
        "Happiness can be found, even in the darkest of times.",
    ]
    first = result.quotes[0]
    assert first == ScrapedQuote(
        text=first.text,
        author="J.K. Rowling",
        likes_count=26034,
        tags=["choices", "abilities"],
        page_number=1,
    )
    assert result.quotes[1].likes_count == 1
    assert result.quotes[1].tags == []
    assert result.quotes[2].likes_count == 0
    assert result.quotes[2].tags == ["hope"]


def test_quote_body_excludes_nested_markup():
    html = (
        '<div class="quoteDetails"><div class="quoteText">“Body text” '
        '<span class="authorOrTitle">Someone,</span> <b>bold bit</b></div></div>'
    )
    result = extract_quotes_page(html, 2)
    assert result.quotes[0].text == "Body text"
    assert result.quotes[0].author == "Someone"
    assert result.quotes[0].page_number == 2


def test_page_number_propagates_to_every_quote():
    result = extract_quotes_page(_fixture("quotes_page.html"), 4)
    assert {q.page_number for q in result.quotes} == {4}


def test_empty_document_has_no_quotes_and_at_least_one_page():
    result = extract_quotes_page("<html><body><p>nothing</p></body></html>", 1)
    assert result.quotes == []
    assert result.total_pages >= 1


def test_total_pages_uses_max_link_when_next_missing():
    html = '<a href="?page=2">2</a><a href="/work/quotes/9?page=7">7</a><a href="?page=4">4</a>'
    assert extract_quotes_page(html, 3).total_pages == 7


def test_total_pages_falls_back_to_current_page():
    assert extract_quotes_page("<html><body></body></html>", 5).total_pages == 5


def test_disabled_next_makes_current_page_a_floor():
    html = '<a href="?page=2">2</a><span class="next_page disabled">next »</span>'
    assert extract_quotes_page(html, 9).total_pages == 9


def test_enabled_next_does_not_raise_to_current_page():
    html = '<a href="?page=2">2</a><a class="next_page" href="?page=2">next »</a>'
    assert extract_quotes_page(html, 9).total_pages == 2


def test_extract_search_hits_parses_fixture():
    hits = extract_search_hits(parse_html(_fixture("search_page.html")))

    assert [h.title for h in hits] == ["The Hobbit", "The Fellowship of the Ring", "The Two Towers"]
    assert [h.work_id for h in hits] == ["1540236", "3204327", "2963218"]
    assert hits[0].author == "J.R.R. Tolkien"
    assert hits[0].cover_image_url == "https://i.gr-assets.com/images/S/compressed.photo.goodreads.com/books/1546071216i/5907.jpg"
    assert hits[1].cover_image_url == "https://i.gr-assets.com/images/S/books/33i/33.jpg"
    assert hits[2].cover_image_url == ""


def test_search_hits_limit_takes_first_rows_in_order():
    html = "<table>" + "".join(_search_row(f"Book {i}", work_id=str(100 + i)) for i in range(5)) + "</table>"
    hits = extract_search_hits(html, limit=2)
    assert [h.title for h in hits] == ["Book 0", "Book 1"]


def test_rows_without_work_id_do_not_count_against_limit():
    rows = [
        _search_row("Missing", work_id=None),
        _search_row("First", work_id="1"),
        _search_row("", work_id="2"),
        _search_row("Second", work_id="3"),
        _search_row("Third", work_id="4"),
    ]
    hits = extract_search_hits("<table>" + "".join(rows) + "</table>", limit=2)
    assert [(h.title, h.work_id) for h in hits] == [("First", "1"), ("Second", "3")]


def test_search_stops_inspecting_rows_once_limit_reached():
    inspected = []

    class _Row:
        def __init__(self, i):
            self.i = i

        def find(self, selector):
            inspected.append(self.i)
            return _El(self.i, selector)

        def find_all(self, selector):
            inspected.append(self.i)
            return [_El(self.i, selector)]

    class _El:
        def __init__(self, i, selector):
            self.i = i
            self.selector = selector

        def text(self):
            return f"Title {self.i}"

        def attr(self, name):
            return f"/work/editions/{self.i}-x" if "editions" in self.selector else ""

    class _Doc:
        def find_all(self, selector):
            return [_Row(i) for i in range(5)]

    hits = extract_search_hits(_Doc(), limit=2)
    assert len(hits) == 2
    assert set(inspected) == {0, 1}


def test_upgrade_cover_url_strips_size_tokens():
    assert upgrade_cover_url("https://x/1._SX98_.jpg") == "https://x/1.jpg"
    assert upgrade_cover_url("https://x/1._CR0,0,98,150_.jpg") == "https://x/1.jpg"
    assert upgrade_cover_url("https://x/plain.jpg") == "https://x/plain.jpg"
    assert upgrade_cover_url("") == ""


def test_parse_likes():
    assert parse_likes("1,234,567 likes") == 1234567
    assert parse_likes("1 like") == 1
    assert parse_likes("likes") == 0
    assert parse_likes("") == 0


def test_tags_collected_from_every_tag_box():
    html = (
        '<div class="quoteDetails"><div class="quoteText">“Body”</div>'
        '<div class="greyText smallText left">tags: <a href="/quotes/tag/life">life</a></div>'
        '<div class="greyText smallText left"><a href="/quotes/tag/love">love</a>, <a>hope</a></div>'
        "</div>"
    )
    assert extract_quotes_page(html, 1).quotes[0].tags == ["life", "love", "hope"]


def test_search_title_joins_every_matching_span():
    row = (
        '<tr itemtype="http://schema.org/Book"><td>'
        '<a class="bookTitle" href="/book/show/1"><span>Dune</span><span> Messiah</span></a>'
        '<a class="authorName"><span>Frank</span></a><a class="authorName"><span> Herbert</span></a>'
        '<a href="/work/editions/3634639-dune">editions</a></td></tr>'
    )
    (hit,) = extract_search_hits("<table>" + row + "</table>")
    assert hit.title == "Dune Messiah"
    assert hit.author == "Frank Herbert"
