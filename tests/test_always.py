import asyncio

import pytest
from kungfu import Error, Ok

from eventual import always, always_async, fail, pure

from fakes import settle_after


def test_runs_on_success() -> None:
    seen: list[object] = []

    result = asyncio.run(always(pure(3), lambda v: seen.append(v) or "cleaned")())

    assert seen == [3]
    assert result == Ok("cleaned")


def test_runs_on_failure() -> None:
    seen: list[object] = []

    result = asyncio.run(always(fail("bad"), lambda r: seen.append(r) or "cleaned")())

    assert seen == ["bad"]
    assert result == Ok("cleaned")


def test_returned_result_is_adopted() -> None:
    passthrough = always(settle_after(0.01, Error("bad")), lambda r: Error(f"still {r}"))

    assert asyncio.run(passthrough()) == Error("still bad")


def test_callback_exception_propagates() -> None:
    def explode(_: object) -> None:
        raise LookupError("cleanup failed")

    with pytest.raises(LookupError):
        asyncio.run(always(pure(1), explode)())


def test_async_callback_on_both_paths() -> None:
    seen: list[object] = []

    async def record(value: object) -> int:
        await asyncio.sleep(0)
        seen.append(value)
        return len(seen)

    assert asyncio.run(always_async(pure("a"), record)()) == Ok(1)
    assert asyncio.run(always_async(fail("b"), record)()) == Ok(2)
    assert seen == ["a", "b"]


def test_returned_operation_is_adopted() -> None:
    failing = always(pure(1), lambda v: fail(f"rejected {v}"))
    succeeding = always(fail("bad"), lambda r: settle_after(0.01, Ok(f"recovered from {r}")))

    assert asyncio.run(failing()) == Error("rejected 1")
    assert asyncio.run(succeeding()) == Ok("recovered from bad")
