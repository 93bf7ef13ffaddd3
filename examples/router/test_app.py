"""Tests for the router example."""

import pytest

pytestmark = pytest.mark.anyio


async def test_home(example_app) -> None:
    result = await example_app.start({"location": {"pathname": "/"}})
    assert result.ok
    assert result.buffer.html() == "<header>wren</header><main>home</main>"


async def test_docs_page_with_query(example_app) -> None:
    result = await example_app.start({"location": "http://example.com/docs/intro?lang=de"})
    assert result.buffer.html().endswith("<main>docs:intro:de</main>")


async def test_item_reads_hashbang_params(example_app) -> None:
    context = {"location": {"pathname": "/items/7", "hash": "#!/items/7?tab=reviews"}}
    result = await example_app.start(context)
    assert result.buffer.html().endswith("<main>item:7:reviews</main>")


async def test_timing_recorded(example_app) -> None:
    context = {"location": {"pathname": "/"}}
    await example_app.start(context)
    assert context["elapsed"] >= 0


async def test_unknown_path_is_error(example_app) -> None:
    result = await example_app.start({"location": {"pathname": "/missing"}})
    assert isinstance(result.error, LookupError)
    assert result.buffer.html() == "<header>wren</header>"
