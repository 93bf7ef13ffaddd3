"""Router — a small site routed on the location pathname.

Demonstrates:
- Function middleware (layout header written to the buffer)
- Class middleware (timing, awaiting ``next()`` to measure the rest of the run)
- ``mount()`` with prefix and pattern matchers
- ``parse_query()`` / ``parse_hash()`` copying parameters into the context
- A fallback registered after the mounts

Run:
    cd examples/router && python app.py /docs/intro?lang=en
"""

import re
import sys
import time

from wren import App, parse_hash, parse_query
from wren.buffer import Buffer
from wren.middleware import Context, Next

app = App()


class Timing:
    """Record how long everything after this middleware took."""

    async def __call__(self, context: Context, buffer: Buffer, next: Next) -> None:
        start = time.monotonic()
        await next()
        context["elapsed"] = time.monotonic() - start


def header(context: Context, buffer: Buffer, next: Next) -> None:
    buffer.append("<header>wren</header>")
    next()


def docs(context: Context, buffer: Buffer, next: Next) -> None:
    page = context["location"]["pathname"].removeprefix("/docs/") or "index"
    lang = context.get("lang", "en")
    buffer.append(f"<main>docs:{page}:{lang}</main>")
    next()


def item(context: Context, buffer: Buffer, next: Next) -> None:
    match = re.match(r"^/items/(\d+)", context["location"]["pathname"])
    tab = context.get("hash", {}).get("tab", "overview")
    buffer.append(f"<main>item:{match.group(1)}:{tab}</main>")
    next()


def home(context: Context, buffer: Buffer, next: Next) -> None:
    buffer.append("<main>home</main>")
    next()


def not_found(context: Context, buffer: Buffer, next: Next) -> None:
    next(LookupError(context["location"].get("pathname")))


app.use(Timing(), header, parse_query(), parse_hash(root="hash"))
app.mount("/docs/", docs)
app.mount(re.compile(r"^/items/\d+"), item)
app.mount(re.compile(r"^/$"), home)
app.use(not_found)


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else "/"
    result = app.run({"location": url} if "://" in url else {"location": {"pathname": url}})
    if result.error:
        print(f"error: {result.error!r}")
    else:
        print(result.buffer.html())
