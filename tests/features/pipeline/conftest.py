"""BDD step definitions for the record pipeline features."""

import io
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from logpipe.core.caller import CallerFileHandler
from logpipe.core.encoding import JsonFormat, LogfmtFormat
from logpipe.core.errors import MultiHandlerError
from logpipe.core.handlers import LvlFilterHandler, MultiHandler, StreamHandler
from logpipe.core.levels import parse_level
from logpipe.core.logger import Logger
from logpipe.core.models import Record
from logpipe.core.ports import Format, Handler

FORMATS: dict[str, Format] = {
    "logfmt": LogfmtFormat(),
    "json": JsonFormat(),
}


class FailingHandler:
    def log(self, record: Record) -> None:
        raise OSError("sink unavailable")


@dataclass
class PipelineContext:
    """State shared between the steps of one scenario."""

    buffer: io.BytesIO = field(default_factory=io.BytesIO)
    fmt: Format = FORMATS["logfmt"]
    threshold: str | None = None
    annotate_caller: bool = False
    failing_sink: bool = False
    error: Exception | None = None

    def build(self) -> Handler:
        handler: Handler = StreamHandler(self.buffer, self.fmt)
        if self.failing_sink:
            handler = MultiHandler(handler, FailingHandler())
        if self.annotate_caller:
            handler = CallerFileHandler(handler)
        if self.threshold is not None:
            handler = LvlFilterHandler(self.threshold, handler)
        return handler

    def lines(self) -> list[str]:
        return self.buffer.getvalue().decode().splitlines()


@pytest.fixture
def ctx() -> PipelineContext:
    """Fresh scenario context for each test."""
    return PipelineContext()


# === Pipeline Steps ===
@given(parsers.parse('a buffer sink with the "{name}" format'))
def step_buffer_sink(ctx: PipelineContext, name: str) -> None:
    ctx.fmt = FORMATS[name]


@given(parsers.parse('the pipeline filters at "{level}"'))
def step_filter(ctx: PipelineContext, level: str) -> None:
    ctx.threshold = level


@given("the pipeline annotates the caller")
def step_annotate_caller(ctx: PipelineContext) -> None:
    ctx.annotate_caller = True


@given("a second sink that always fails")
def step_failing_sink(ctx: PipelineContext) -> None:
    ctx.failing_sink = True


# === Emission Steps ===
@when(parsers.parse('a "{level}" record "{message}" is logged'))
def step_log(ctx: PipelineContext, level: str, message: str) -> None:
    log = Logger(handler=ctx.build())
    try:
        log.log(parse_level(level), message)
    except Exception as e:
        ctx.error = e


# === Assertion Steps ===
@then("the buffer is empty")
def step_buffer_empty(ctx: PipelineContext) -> None:
    assert ctx.buffer.getvalue() == b""


@then(parsers.parse("the buffer holds {n:d} line"))
def step_line_count(ctx: PipelineContext, n: int) -> None:
    assert len(ctx.lines()) == n


@then(parsers.parse('the line contains "{text}"'))
def step_line_contains(ctx: PipelineContext, text: str) -> None:
    assert text in ctx.buffer.getvalue().decode()


@then(parsers.parse("the line contains '{text}'"))
def step_line_contains_quoted(ctx: PipelineContext, text: str) -> None:
    assert text in ctx.buffer.getvalue().decode()


@then("the emitter receives a handler error")
def step_handler_error(ctx: PipelineContext) -> None:
    assert isinstance(ctx.error, MultiHandlerError)
    assert isinstance(ctx.error.exceptions[0], OSError)
