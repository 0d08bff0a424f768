# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Spinner runner for eyecandy.

``SpinnerModel`` shows an animated progress line while a single task runs in
a worker thread. A ticker thread and the worker feed one message queue; the
calling thread consumes it in arrival order, updates the model and redraws
through a Rich ``Live`` display. Only the calling thread touches the model.

Example::

    err = SpinnerModel("Fetching index", fetch_index).spin()
    if err is not None:
        raise SystemExit(1)
"""

from __future__ import annotations

import dataclasses
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.style import Style
from rich.text import Text

from eyecandy.logging import logger

SpinnerTask = Callable[[], None]


@dataclass(frozen=True)
class SpinnerTick:
    """Advance the animation by one frame."""


@dataclass(frozen=True)
class SpinnerStop:
    """Posted once by the worker when the task has returned or raised."""

    err: Exception | None = None


@dataclass(frozen=True)
class SpinnerInterrupt:
    """Stop displaying without waiting for the task."""


SpinnerMsg = SpinnerTick | SpinnerStop | SpinnerInterrupt


@dataclass(frozen=True)
class SpinnerStyle:
    """Styles of the progress, success and failure lines."""

    progress_style: Style
    success_style: Style
    failure_style: Style


SPINNER_STYLE_DEFAULT = SpinnerStyle(
    progress_style=Style(color="color(15)", dim=True),
    success_style=Style(color="color(2)"),
    failure_style=Style(color="color(1)", bold=True),
)


@dataclass
class SpinnerModel:  # pylint: disable=too-many-instance-attributes
    """
    Progress line tracking one task from start to completion.

    Args:
        title (str): Text shown next to the animation and in the final line
        task (SpinnerTask): Callable run once in a worker thread; an
            ``Exception`` it raises becomes the result
        style (SpinnerStyle): Styles of the progress and final lines
        spinner (str): Name of a Rich spinner animation
        spinner_style (Style): Style of the animation frame only
        console (Console | None): Console to draw on (global console if None)
    """

    title: str
    task: SpinnerTask
    style: SpinnerStyle = SPINNER_STYLE_DEFAULT
    spinner: str = "line"
    spinner_style: Style = field(default_factory=Style.null)
    console: Console | None = None
    err: Exception | None = field(default=None, init=False)
    done: bool = field(default=False, init=False)
    frame: int = field(default=0, init=False)
    _frames: list[str] = field(default_factory=list, init=False, repr=False)
    _interval: float = field(default=0.1, init=False, repr=False)
    _messages: queue.Queue[SpinnerMsg] = field(
        default_factory=queue.Queue, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # Raises KeyError for unknown spinner names
        animation = Spinner(self.spinner)
        self._frames = animation.frames
        self._interval = animation.interval / 1000

    def with_style(self, style: SpinnerStyle) -> SpinnerModel:
        """Return a copy drawn with ``style``."""
        return dataclasses.replace(self, style=style)

    def with_spinner(self, spinner: str) -> SpinnerModel:
        """Return a copy animated with the named Rich spinner, e.g. ``"dots"``."""
        return dataclasses.replace(self, spinner=spinner)

    def with_spinner_style(self, spinner_style: Style) -> SpinnerModel:
        """Return a copy whose animation frame uses ``spinner_style``."""
        return dataclasses.replace(self, spinner_style=spinner_style)

    def update(self, msg: SpinnerMsg) -> bool:
        """Apply ``msg`` to the model and report whether the loop should quit."""
        if isinstance(msg, SpinnerInterrupt):
            return True
        if isinstance(msg, SpinnerStop):
            # Done is terminal, later stops are ignored
            if not self.done:
                self.done = True
                self.err = msg.err
            return True
        if not self.done:
            self.frame = (self.frame + 1) % len(self._frames)
        return False

    def view(self) -> Text:
        """Render the current state as a single line of styled text."""
        if not self.done:
            text = Text.assemble(
                (self._frames[self.frame], self.spinner_style),
                f" {self.title}",
                style=self.style.progress_style,
            )
        elif self.err is not None:
            text = Text(f"* {self.title} ... Failed: {self.err}", style=self.style.failure_style)
        else:
            text = Text(f"* {self.title} ... Done", style=self.style.success_style)
        text.append("\n")
        return text

    def interrupt(self) -> None:
        """Stop the display as soon as possible; the task keeps running."""
        self._messages.put(SpinnerInterrupt())

    def _tick(self, stopped: threading.Event) -> None:
        while not stopped.wait(self._interval):
            self._messages.put(SpinnerTick())

    def _work(self) -> None:
        try:
            self.task()
        except Exception as err:  # pylint: disable=broad-exception-caught
            logger.debug("Task '%s' failed: %s", self.title, err)
            self._messages.put(SpinnerStop(err))
            return
        logger.debug("Task '%s' finished", self.title)
        self._messages.put(SpinnerStop())

    def spin(self) -> Exception | None:
        """Run the task under the spinner and return its error, if any.

        Returns None when the task succeeded or when the display was
        interrupted (Ctrl-C or ``interrupt()``) before the task finished.
        """
        stopped = threading.Event()
        ticker = threading.Thread(
            target=self._tick, args=(stopped,), name="eyecandy-spinner-tick", daemon=True
        )
        worker = threading.Thread(target=self._work, name="eyecandy-spinner-task", daemon=True)

        with Live(self.view(), console=self.console, auto_refresh=False) as live:
            ticker.start()
            worker.start()
            try:
                while True:
                    quit_loop = self.update(self._messages.get())
                    live.update(self.view(), refresh=True)
                    if quit_loop:
                        break
            except KeyboardInterrupt:
                logger.debug("Spinner '%s' interrupted", self.title)
            finally:
                stopped.set()

        return self.err


def run(title: str, task: SpinnerTask, *, console: Console | None = None) -> Exception | None:
    """Run ``task`` under a default spinner titled ``title``; return its error."""
    return SpinnerModel(title, task, console=console).spin()
