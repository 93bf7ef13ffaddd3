"""URL helpers: browser-style location mappings."""

from urllib.parse import urlsplit


def parse_location(url: str) -> dict[str, str]:
    """Split *url* into the fields a browser ``Location`` exposes.

    ``search`` keeps its leading ``?`` and ``hash`` its leading ``#``,
    both empty when absent::

        parse_location("https://example.com:8080/docs/?page=2#!?tab=api")
        # {"href": "https://example.com:8080/docs/?page=2#!?tab=api",
        #  "protocol": "https:", "host": "example.com:8080",
        #  "hostname": "example.com", "port": "8080",
        #  "origin": "https://example.com:8080", "pathname": "/docs/",
        #  "search": "?page=2", "hash": "#!?tab=api"}
    """
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    protocol = f"{parts.scheme}:" if parts.scheme else ""
    pathname = parts.path or ("/" if host else "")
    return {
        "href": url,
        "protocol": protocol,
        "host": host,
        "hostname": parts.hostname or "",
        "port": str(parts.port) if parts.port is not None else "",
        "origin": f"{protocol}//{host}" if protocol and host else "",
        "pathname": pathname,
        "search": f"?{parts.query}" if parts.query else "",
        "hash": f"#{parts.fragment}" if parts.fragment else "",
    }
