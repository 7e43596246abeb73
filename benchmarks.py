# ruff: noqa: D100, D103

from functools import reduce

from pytest_benchmark.fixture import BenchmarkFixture
from purely import Maybe, Task, define_union, match

Color = define_union({"Red": 0, "Green": 0, "Blue": 0, "RGB": 3}, name="Color")


def create_task_chain(chain_length: int) -> Task[int]:
    return reduce(
        lambda acc, _: acc.chain(lambda value: Task.succeed(value + 1)),
        range(chain_length),
        Task.succeed(0),
    )


def test_match(benchmark: BenchmarkFixture) -> None:
    color = Color.RGB(255, 0, 0)
    handlers = {
        "Red": lambda: 1,
        "Green": lambda: 2,
        "Blue": lambda: 3,
        "RGB": lambda r, g, b: r + g + b,
    }

    benchmark(match, color, handlers)


def test_curried_construction(benchmark: BenchmarkFixture) -> None:
    benchmark(lambda: Color.RGB(255)(0)(0))


def test_maybe_map_chain(benchmark: BenchmarkFixture) -> None:
    maybe = Maybe.Just(1)

    benchmark(
        reduce, lambda acc, _: acc.map(lambda x: x + 1), range(500), maybe
    )


def test_task_chain(benchmark: BenchmarkFixture) -> None:
    """Benchmark a long chain of tasks built with functools.reduce."""

    task = create_task_chain(5000)
    benchmark(task.run_sync)


def test_sequence(benchmark: BenchmarkFixture) -> None:
    task = Task.sequence(Task.succeed(i) for i in range(500))

    benchmark(task.run_sync)
