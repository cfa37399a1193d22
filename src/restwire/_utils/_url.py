from urllib.parse import quote


def encode_value(value: str) -> str:
    """Percent-encode ``value`` as UTF-8, escaping every reserved character.

    Spaces become ``%20`` rather than ``+``.

    Examples:
        >>> encode_value("a b/c")
        'a%20b%2Fc'
    """
    return quote(value, safe="")
