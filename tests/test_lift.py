import asyncio

from kungfu import Error, Ok

from eventual import catching_async, fail, from_result, lift as L, pure


def test_pure_and_fail() -> None:
    assert asyncio.run(pure(1)()) == Ok(1)
    assert asyncio.run(fail("e")()) == Error("e")


def test_from_result_keeps_outcome() -> None:
    assert asyncio.run(from_result(Error("kept"))()) == Error("kept")


def test_catching_async_turns_exception_into_error() -> None:
    async def boom() -> int:
        raise ValueError("bad payload")

    guarded = catching_async(boom, on_error=lambda exc: str(exc))

    assert asyncio.run(guarded()) == Error("bad payload")


def test_catching_async_passes_value_through() -> None:
    async def fine() -> int:
        return 3

    assert asyncio.run(L.catching_async(fine, on_error=str)()) == Ok(3)
