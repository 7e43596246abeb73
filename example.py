import asyncio
import logging
import random
from dataclasses import dataclass
from pathlib import Path

from purely import Task

OUTPUT = Path("pure-test.file")


@dataclass(frozen=True)
class Response:
    body: str

    async def text(self) -> str:
        return self.body


async def fetch(url: str) -> Response:
    # stand-in for a real HTTP client
    return Response("<p>Hello</p>")


async def write_file_async(path: Path, content: str) -> None:
    await asyncio.to_thread(path.write_text, content, "utf8")


get_rand = Task.of(random.random)


def fetch_google(num: float) -> Task[str]:
    return Task.of(fetch, f"google.com?{num}").chain(
        lambda response: Task.of(response.text)
    )


def write_file(path: Path, content: str) -> Task[None]:
    return Task.of(write_file_async, path, content)


def print_line(content: str) -> Task[None]:
    return Task.of(print, content)


# nothing runs until `program.run` is awaited
program = (
    get_rand.chain(fetch_google)
    .chain(lambda content: write_file(OUTPUT, content))
    .chain(lambda _: print_line("Done"))
)

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    program.run_sync()
