import pytest

from completion_providers.base.streaming import iter_sse_data, parse_data_line


async def _lines(items):
    for item in items:
        yield item


@pytest.mark.parametrize(
    "line, expected",
    [
        ('data: {"a":1}', '{"a":1}'),
        ('data:{"a":1}', '{"a":1}'),
        ("data:  two", " two"),
        ("data: [DONE]\r\n", "[DONE]"),
        (": keep-alive", None),
        ("event: message", None),
        ("", None),
    ],
)
def test_parse_data_line(line, expected):
    assert parse_data_line(line) == expected  # nosec B101


@pytest.mark.asyncio
async def test_iter_sse_data_skips_noise_and_stops_at_done():
    lines = ["", ": ping", "data: one", "id: 3", "data: two", "data: [DONE]", "data: never"]
    assert [p async for p in iter_sse_data(_lines(lines))] == ["one", "two"]  # nosec B101


@pytest.mark.asyncio
async def test_iter_sse_data_ends_when_lines_end():
    assert [p async for p in iter_sse_data(_lines(["data: only"]))] == ["only"]  # nosec B101
