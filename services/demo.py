"""
Demo Service - the PING / SET / GET / set-struct walkthrough.

Each step talks to an IKeyValueStore and yields the lines it would print.
Steps run sequentially on the store's single connection.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Union

from core.constants import (
    FAVORITE_MOVIE_KEY,
    FAVORITE_MOVIE_VALUE,
    NONEXISTENT_KEY,
    RELEASE_YEAR_KEY,
    RELEASE_YEAR_VALUE,
    STEP_ALL,
    USER_OBJECT_KEY,
    DemoStep,
)
from core.errors import KeyNotFoundError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.key_value_store import IKeyValueStore
from models.schemas import demo_user


class KeyValueDemo:
    """
    Runs demo steps against a key-value store.

    Every step is a generator: a line is yielded as soon as the command
    behind it has answered, before the next command is sent.

    Args:
        store: IKeyValueStore implementation (connection already acquired)
    """

    def __init__(self, store: IKeyValueStore):
        self.store = store
        self._steps: Dict[DemoStep, Callable[[], Iterator[str]]] = {
            DemoStep.PING: self.ping,
            DemoStep.SET: self.set,
            DemoStep.GET: self.get,
            DemoStep.SET_STRUCT: self.set_struct,
        }

    def ping(self) -> Iterator[str]:
        """Liveness probe; the server should answer PONG."""
        reply = self.store.ping()
        yield f"PING Response = {reply}"

    def set(self) -> Iterator[str]:
        """Store a string and an integer value."""
        self.store.set(FAVORITE_MOVIE_KEY, FAVORITE_MOVIE_VALUE)
        self.store.set(RELEASE_YEAR_KEY, RELEASE_YEAR_VALUE)
        yield from ()

    def get(self) -> Iterator[str]:
        """
        Read back both values, then a key that was never stored.

        A missing key is reported as a line, not raised.
        """
        value = self.store.get_string(FAVORITE_MOVIE_KEY)
        yield f"{FAVORITE_MOVIE_KEY} = {value}"

        year = self.store.get_int(RELEASE_YEAR_KEY)
        yield f"{RELEASE_YEAR_KEY} = {year}"

        try:
            value = self.store.get_string(NONEXISTENT_KEY)
        except KeyNotFoundError:
            yield f"{NONEXISTENT_KEY} does not exist"
        else:
            yield f"{NONEXISTENT_KEY} = {value}"

    def set_struct(self) -> Iterator[str]:
        """Serialize the demo user to JSON and store it."""
        self.store.set_struct(USER_OBJECT_KEY, demo_user())
        yield from ()

    def stream(self, steps: Iterable[Union[DemoStep, str]]) -> Iterator[str]:
        """
        Run steps in order, yielding each output line as it is produced.

        Stops at the first error, which propagates to the caller.
        """
        for step in resolve_steps(steps):
            logger.debug(LogMessages.STEP_STARTED.format(step=step.value))
            yield from self._steps[step]()

    def run(self, steps: Iterable[Union[DemoStep, str]]) -> List[str]:
        """Run steps in order and collect their output."""
        return list(self.stream(steps))


def resolve_steps(steps: Iterable[Union[DemoStep, str]]) -> List[DemoStep]:
    """
    Turn step names into DemoStep values; "all" expands to every step.

    Raises:
        ValueError: On an unknown step name
    """
    resolved: List[DemoStep] = []
    for step in steps:
        if step == STEP_ALL:
            resolved.extend(DemoStep)
            continue
        try:
            resolved.append(DemoStep(step))
        except ValueError:
            raise ValueError(
                ErrorMessages.UNKNOWN_STEP.format(
                    step=step, valid_steps=step_names()
                )
            ) from None
    return resolved


def step_names() -> List[str]:
    return [step.value for step in DemoStep] + [STEP_ALL]
