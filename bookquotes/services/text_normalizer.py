import re

_SMART_DOUBLE_QUOTES = re.compile(r"[\u201c\u201d]")
_SMART_SINGLE_QUOTES = re.compile(r"[\u2018\u2019]")
_LEADING_DASH = re.compile(r"^[\s\u2015\u2014\u2013]+")
_WHITESPACE = re.compile(r"\s+")
# Attribution separator that sometimes ends up glued to the quote body.
_TRAILING_DASHES = re.compile(r"[\s\u2015\u2014\u2013-]+$")


def normalize(raw: str) -> str:
    """Turn a raw quote fragment into its canonical form.

    May return an empty string, which means there is no usable quote.
    """
    text = _SMART_DOUBLE_QUOTES.sub("", raw or "")
    text = _SMART_SINGLE_QUOTES.sub("'", text)
    text = _LEADING_DASH.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()
    text = _TRAILING_DASHES.sub("", text)
    return text.strip()
