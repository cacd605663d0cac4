# share.py
"""""
Share links: '<base>?q=<url-encoded expression>'.

Opening a share link evaluates the expression without recording it in the history.
"""""

from urllib.parse import parse_qs, quote_plus, urlsplit


def share_link(expression, base_url):
    return f"{base_url}?q={quote_plus(expression.strip())}"


def expression_from_link(link):
    """Return the expression carried by a share link.

    Anything that is not a link with a 'q' parameter is taken as the expression itself,
    so 'main.py "2+3"' and 'main.py "calculator://open?q=2%2B3"' behave the same.
    """
    parts = urlsplit(link)
    if parts.query:
        values = parse_qs(parts.query, keep_blank_values=True).get("q")
        if values:
            return values[0].strip()
    return link.strip()
