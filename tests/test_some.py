import asyncio
import gc
import logging

import pytest
from kungfu import Error, LazyCoroResult, Ok, Result

from eventual import NotAnOperationError, ReasonLog, _helpers, some, someM
from eventual._helpers import identity

from fakes import settle_after


def test_empty_input_succeeds_with_empty_list() -> None:
    assert asyncio.run(some([])()) == Ok([])
    assert asyncio.run(some(None)()) == Ok([])


def test_first_chronological_success_wins() -> None:
    a = settle_after(0.03, Ok("A"))
    b = settle_after(0.01, Error("B"))
    c = settle_after(0.02, Ok("C"))

    assert asyncio.run(some([a, b, c])()) == Ok("C")


def test_single_success_among_failures() -> None:
    ops = [
        settle_after(0.01, Error("x")),
        settle_after(0.03, Ok("late")),
        settle_after(0.02, Error("y")),
    ]

    assert asyncio.run(some(ops)()) == Ok("late")


def test_all_failures_collected_in_settlement_order() -> None:
    ops = [
        settle_after(0.03, Error("z")),
        settle_after(0.01, Error("x")),
        settle_after(0.02, Error("y")),
    ]

    result = asyncio.run(some(ops)())

    assert result == Error(["x", "y", "z"])
    assert isinstance(result.unwrap_err(), ReasonLog)


def test_reason_order_is_stable_across_runs() -> None:
    def build() -> list[LazyCoroResult[str, str]]:
        return [
            settle_after(0.02, Error("second")),
            settle_after(0.03, Error("third")),
            settle_after(0.01, Error("first")),
        ]

    outcomes = [asyncio.run(some(build())()) for _ in range(3)]

    assert outcomes == [Error(["first", "second", "third"])] * 3


def test_non_operation_rejected_before_anything_starts() -> None:
    trace: list[str] = []
    ok = settle_after(0.0, Ok(1), trace=trace, name="ok")

    with pytest.raises(NotAnOperationError) as info:
        some([ok, "not an operation"])  # type: ignore[list-item]

    assert info.value.index == 1
    assert info.value.value == "not an operation"
    assert isinstance(info.value, TypeError)
    assert trace == []


def test_generator_input_is_accepted() -> None:
    ops = (settle_after(d, Error(d)) for d in (0.02, 0.01))

    assert asyncio.run(some(ops)()) == Error([0.01, 0.02])


def test_losers_keep_running_after_winner() -> None:
    trace: list[str] = []

    async def main() -> Result[str, str]:
        result = await some([
            settle_after(0.0, Ok("fast"), trace=trace, name="fast"),
            settle_after(0.02, Ok("slow"), trace=trace, name="slow"),
        ])
        assert "end:slow" not in trace
        await asyncio.sleep(0.05)
        return result

    assert asyncio.run(main()) == Ok("fast")
    assert "end:slow" in trace


def test_raised_exception_propagates() -> None:
    async def broken() -> Result[int, str]:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(some([LazyCoroResult(broken)])())


def test_someM_with_plain_thunks() -> None:
    async def fails() -> Result[int, str]:
        await asyncio.sleep(0.01)
        return Error("nope")

    async def succeeds() -> Result[int, str]:
        await asyncio.sleep(0.02)
        return Ok(5)

    run = someM(
        [fails, succeeds],
        extract=identity,
        on_empty=lambda: Ok(0),
        on_all_failed=Error,
        wrap=identity,
    )

    assert asyncio.run(run()) == Ok(5)


def test_someM_rejects_what_is_operation_refuses() -> None:
    with pytest.raises(NotAnOperationError):
        someM(
            [42],
            extract=identity,
            on_empty=lambda: Ok(0),
            on_all_failed=Error,
            wrap=identity,
        )


def test_loser_exception_is_retrieved_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="eventual")

    async def late_crash() -> Result[str, str]:
        await asyncio.sleep(0.01)
        raise RuntimeError("crashed after losing")

    async def main() -> Result[str, str]:
        result = await some([settle_after(0.0, Ok("winner")), LazyCoroResult(late_crash)])
        await asyncio.sleep(0.05)
        return result

    assert asyncio.run(main()) == Ok("winner")
    gc.collect()

    lost = [r for r in caplog.records if r.name == "eventual._helpers"]
    assert len(lost) == 1
    assert lost[0].levelno == logging.DEBUG
    assert lost[0].exc_info is not None
    assert isinstance(lost[0].exc_info[1], RuntimeError)
    assert not any("never retrieved" in r.getMessage() for r in caplog.records)


def test_loser_still_pending_at_shutdown(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    trace: list[str] = []

    result = asyncio.run(some([
        settle_after(0.0, Ok("winner")),
        settle_after(10.0, Ok("never"), trace=trace, name="stuck"),
    ])())
    gc.collect()

    assert result == Ok("winner")
    assert trace == ["start:stuck"]
    assert not _helpers._background
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_reason_log_is_a_plain_ordered_list() -> None:
    reasons = ReasonLog[str]()
    reasons.record("b")
    reasons.record("a")

    assert reasons == ["b", "a"]
    assert repr(reasons) == "ReasonLog(['b', 'a'])"
