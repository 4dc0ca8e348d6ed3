"""
Tests for the asyncio combinators of rulekit.rule.
"""

import asyncio

import pytest

from rulekit import combine_all_f, combine_f, invalid, valid


async def delayed(rule, delay=0.0, started=None):
    if started is not None:
        started.append(rule)
    await asyncio.sleep(delay)
    return rule


class TestAndF:
    @pytest.mark.asyncio
    async def test_left_errors_first(self):
        rule = await invalid("now").and_f(delayed(invalid("later"), 0.01))
        assert rule == invalid("now", "later")

    @pytest.mark.asyncio
    async def test_valid_adopts_other(self):
        assert await valid().and_f(delayed(invalid("x"))) == invalid("x")
        assert await valid().and_f(delayed(valid())) == valid()

    @pytest.mark.asyncio
    async def test_accepts_task(self):
        task = asyncio.ensure_future(delayed(invalid("task")))
        assert await invalid("first").and_f(task) == invalid("first", "task")


class TestOrF:
    @pytest.mark.asyncio
    async def test_fallback(self):
        assert await invalid("a").or_f(delayed(valid())) == valid()
        assert await invalid("a").or_f(delayed(invalid("b"))) == invalid("a", "b")
        assert await valid().or_f(delayed(invalid("b"))) == valid()


class TestAndThenF:
    @pytest.mark.asyncio
    async def test_invalid_never_starts_computation(self):
        calls = []

        def supplier():
            calls.append(1)
            return delayed(invalid("never"))

        rule = invalid("first")
        assert await rule.and_then_f(supplier) is rule
        assert calls == []

    @pytest.mark.asyncio
    async def test_valid_runs_computation(self):
        started = []
        rule = await valid().and_then_f(lambda: delayed(invalid("second"), started=started))
        assert rule == invalid("second")
        assert started == [invalid("second")]


class TestCombineF:
    @pytest.mark.asyncio
    async def test_empty(self):
        assert await combine_f() == valid()
        assert await combine_all_f([]) == valid()

    @pytest.mark.asyncio
    async def test_single_failure_regardless_of_completion_order(self):
        rule = await combine_f(
            delayed(valid(), 0.03),
            delayed(invalid("only"), 0.0),
            delayed(valid(), 0.01),
        )
        assert rule == invalid("only")

    @pytest.mark.asyncio
    async def test_argument_order_not_completion_order(self):
        rule = await combine_f(
            delayed(invalid("slow"), 0.03),
            delayed(invalid("fast"), 0.0),
        )
        assert rule == invalid("slow", "fast")

    @pytest.mark.asyncio
    async def test_every_computation_runs(self):
        started = []
        rule = await combine_all_f(
            delayed(r, started=started) for r in (invalid("a"), valid(), invalid("b"))
        )
        assert rule == invalid("a", "b")
        assert len(started) == 3

    @pytest.mark.asyncio
    async def test_failure_waits_for_every_computation(self):
        finished = []

        async def boom():
            raise RuntimeError("validator down")

        async def slow():
            await asyncio.sleep(0.02)
            finished.append("slow")
            return valid()

        with pytest.raises(RuntimeError, match="validator down"):
            await combine_f(boom(), slow())
        assert finished == ["slow"]

    @pytest.mark.asyncio
    async def test_combine_method(self):
        rule = await invalid("now").combine_f(delayed(invalid("later")))
        assert rule == invalid("now", "later")
