import asyncio
import gc

import pytest

from fpkit import IO, Left, Right, Task, from_io, never, of, try_catch
from fpkit.kernel import monoid_string, monoid_sum, semigroup_string
from fpkit.task import ap, get_monoid, get_race_monoid, get_semigroup, sequence, task, traverse
from fpkit.task import laws

from fakes import Boom, Counter, Recorder


def test_of_resolves_value() -> None:
    async def run():
        assert await of(42).run() == 42

    asyncio.run(run())


def test_task_is_lazy_until_run() -> None:
    counter = Counter()

    async def _run() -> int:
        return counter.increment()

    t = Task(_run).map(lambda n: n * 2).chain(lambda n: of(n + 1))
    assert counter.count == 0

    assert asyncio.run(t.run()) == 3
    assert counter.count == 1


def test_no_result_caching() -> None:
    counter = Counter()

    async def _run() -> int:
        return counter.increment()

    t = Task(_run)

    async def run():
        await t.run()
        await t.run()

    asyncio.run(run())
    assert counter.count == 2


def test_from_io_runs_effect_on_invocation() -> None:
    counter = Counter()
    t = from_io(IO(counter.increment))

    async def run():
        pending = t.run()
        assert counter.count == 1
        assert await pending == 1
        assert await t.run() == 2

    asyncio.run(run())
    assert counter.count == 2


class TestMap:
    def test_functor_composition(self):
        async def run():
            return await laws.functor_composition(of(3), lambda x: x + 1, lambda x: x * 10)

        assert asyncio.run(run())

    def test_map_preserves_rejection(self):
        recorder = Recorder()
        exc = Boom("map")
        mapped = recorder.failing("a", exc).map(lambda x: x + 1)

        with pytest.raises(Boom) as info:
            asyncio.run(mapped.run())
        assert info.value is exc

    def test_instance_record(self):
        assert task.uri == "Task"
        assert asyncio.run(task.map(task.of(2), lambda x: x * 3).run()) == 6


class TestChain:
    def test_left_identity(self):
        async def run():
            return await laws.left_identity(5, lambda x: of(x * 2))

        assert asyncio.run(run())

    def test_sequencing_order(self):
        recorder = Recorder()
        a = recorder.delayed("a", 1, delay=0.02)
        b = recorder.delayed("b", 2)

        assert asyncio.run(a.chain(lambda _: b).run()) == 2
        assert recorder.events == ["start:a", "end:a", "start:b", "end:b"]

    def test_rejection_stops_chain(self):
        recorder = Recorder()
        chained = recorder.failing("a", Boom()).chain(lambda _: recorder.delayed("b", 2))

        with pytest.raises(Boom):
            asyncio.run(chained.run())
        assert "start:b" not in recorder.events

    def test_rejection_in_second_stage(self):
        recorder = Recorder()
        chained = of(1).chain(lambda _: recorder.failing("b", Boom("late")))

        with pytest.raises(Boom, match="late"):
            asyncio.run(chained.run())


class TestAp:
    def test_applies_function(self):
        assert asyncio.run(ap(of(lambda x: x + 1), of(1)).run()) == 2
        assert asyncio.run(of(lambda x: x * 2).ap_(of(4)).run()) == 8

    def test_starts_both_before_either_completes(self):
        recorder = Recorder()
        fab = recorder.delayed("f", lambda x: x + 1, delay=0.02)
        fa = recorder.delayed("v", 1, delay=0.01)

        assert asyncio.run(ap(fab, fa).run()) == 2
        assert recorder.events[:2] == ["start:f", "start:v"]

    def test_resolving_operand_starts_next_to_never_resolving_one(self):
        recorder = Recorder()
        combined = ap(recorder.hanging("f"), recorder.delayed("v", 1))

        async def run():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(combined.run(), timeout=0.05)

        asyncio.run(run())
        assert "start:v" in recorder.events
        assert "end:v" in recorder.events

    def test_first_rejection_wins_and_sibling_keeps_running(self):
        recorder = Recorder()
        combined = ap(recorder.delayed("f", lambda x: x, delay=0.02), recorder.failing("v", Boom()))

        async def run():
            with pytest.raises(Boom):
                await combined.run()
            await asyncio.sleep(0.05)

        asyncio.run(run())
        assert "end:f" in recorder.events


class TestTryCatch:
    def test_success_branch(self):
        async def produce() -> int:
            return 7

        result = asyncio.run(try_catch(produce, str).run())
        assert result == Right(7)

    def test_failure_branch(self):
        async def produce() -> int:
            raise Boom("nope")

        result = asyncio.run(try_catch(produce, lambda exc: f"failed: {exc}").run())
        assert result == Left("failed: nope")

    def test_synchronous_failure(self):
        def produce():
            raise ValueError("sync")

        result = asyncio.run(try_catch(produce, type).run())
        assert result == Left(ValueError)

    def test_fold_dispatches_on_branch(self):
        async def produce() -> int:
            raise Boom()

        result = asyncio.run(try_catch(produce, lambda _: "bad").run())
        assert result.fold(lambda e: f"left:{e}", lambda a: f"right:{a}") == "left:bad"


class TestSemigroup:
    def test_concat_is_sequential(self):
        recorder = Recorder()
        S = get_semigroup(semigroup_string)
        x = recorder.delayed("x", "a", delay=0.02)
        y = recorder.delayed("y", "b")

        assert asyncio.run(S.concat(x, y).run()) == "ab"
        assert recorder.events == ["start:x", "end:x", "start:y", "end:y"]

    def test_monoid_identity(self):
        async def run():
            ok_string = await laws.monoid_identity(get_monoid(monoid_string), of("abc"))
            ok_sum = await laws.monoid_identity(get_monoid(monoid_sum), of(5))
            return ok_string and ok_sum

        assert asyncio.run(run())

    def test_monoid_empty(self):
        assert asyncio.run(get_monoid(monoid_sum).empty.run()) == 0


class TestRaceMonoid:
    def test_fast_value_wins_against_never_in_either_order(self):
        race = get_race_monoid()
        recorder = Recorder()
        fast = recorder.delayed("fast", "X", delay=0.01)

        async def run():
            first = await race.concat(fast, never).run()
            second = await race.concat(never, fast).run()
            third = await race.concat(fast, recorder.hanging("h")).run()
            fourth = await race.concat(recorder.hanging("h"), fast).run()
            return [first, second, third, fourth]

        assert asyncio.run(run()) == ["X", "X", "X", "X"]

    def test_identity_law(self):
        race = get_race_monoid()
        assert race.empty is never

        async def run():
            return await laws.monoid_identity(race, of(3))

        assert asyncio.run(run())

    def test_first_to_settle_wins(self):
        race = get_race_monoid()
        recorder = Recorder()
        slow = recorder.delayed("slow", "S", delay=0.05)
        fast = recorder.delayed("fast", "F", delay=0.01)

        async def run():
            winner = await race.concat(slow, fast).run()
            await asyncio.sleep(0.08)
            return winner

        assert asyncio.run(run()) == "F"
        # The loser runs to completion; its value is discarded
        assert "end:slow" in recorder.events

    def test_left_wins_simultaneous_settle(self):
        race = get_race_monoid()
        assert asyncio.run(race.concat(of("a"), of("b")).run()) == "a"

    def test_rejection_can_win(self):
        race = get_race_monoid()
        recorder = Recorder()
        combined = race.concat(recorder.delayed("slow", "S", delay=0.05), recorder.failing("fast", Boom()))

        with pytest.raises(Boom):
            asyncio.run(combined.run())

    def test_losing_rejection_is_discarded(self):
        race = get_race_monoid()
        recorder = Recorder()
        combined = race.concat(recorder.delayed("fast", "F"), recorder.failing("slow", Boom(), delay=0.02))

        async def run():
            winner = await combined.run()
            await asyncio.sleep(0.05)
            return winner

        assert asyncio.run(run()) == "F"
        assert "fail:slow" in recorder.events

    def test_cancelled_race_discards_late_rejection(self, caplog):
        race = get_race_monoid()
        recorder = Recorder()
        combined = race.concat(recorder.failing("slow", Boom(), delay=0.02), recorder.delayed("slower", "S", delay=0.05))

        async def run():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(combined.run(), timeout=0.005)
            await asyncio.sleep(0.1)
            gc.collect()

        asyncio.run(run())
        assert "fail:slow" in recorder.events
        assert "end:slower" in recorder.events
        assert not any("never retrieved" in r.getMessage() for r in caplog.records)

    def test_concat_with_never_returns_new_task(self):
        race = get_race_monoid()
        t = of("X")
        assert race.concat(t, never) is not t
        assert race.concat(never, t) is not t
        assert asyncio.run(race.concat(never, t).run()) == "X"

    def test_never_does_not_resolve(self):
        async def run():
            with pytest.raises(asyncio.TimeoutError):
                await asyncio.wait_for(never.run(), timeout=0.01)

        asyncio.run(run())


class TestTraverse:
    def test_collects_in_input_order(self):
        recorder = Recorder()

        def fetch(n: int) -> Task[int]:
            return recorder.delayed(str(n), n * 10, delay=(4 - n) * 0.01)

        assert asyncio.run(traverse([1, 2, 3], fetch).run()) == [10, 20, 30]
        starts = [i for i, e in enumerate(recorder.events) if e.startswith("start:")]
        ends = [i for i, e in enumerate(recorder.events) if e.startswith("end:")]
        assert max(starts) < min(ends)

    def test_sequence(self):
        assert asyncio.run(sequence([of(1), of(2)]).run()) == [1, 2]
        assert asyncio.run(sequence([]).run()) == []

    def test_rejection_propagates(self):
        recorder = Recorder()
        with pytest.raises(Boom):
            asyncio.run(sequence([of(1), recorder.failing("x", Boom())]).run())


def test_repr_names_producer() -> None:
    async def load() -> int:
        return 1

    assert repr(Task(load)).startswith("Task(")
    assert "load" in repr(Task(load))
