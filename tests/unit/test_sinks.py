"""Unit tests for info sinks"""

import logging

from rich.console import Console

from ccicheck.utils.sinks import CollectingSink, console_sink, log_sink


def test_collecting_sink_keeps_messages():
    sink = CollectingSink()

    sink("first")
    sink("second")

    assert sink.messages == ["first", "second"]

    sink.clear()
    assert sink.messages == []


def test_collecting_sink_forwards():
    forwarded = []
    sink = CollectingSink(forward=forwarded.append)

    sink("hello")

    assert sink.messages == ["hello"]
    assert forwarded == ["hello"]


def test_log_sink_uses_info_level(caplog):
    caplog.set_level(logging.INFO, logger="ccicheck.test")

    log_sink(logging.getLogger("ccicheck.test"))("Manifest file does not exist.")

    assert caplog.records[-1].levelno == logging.INFO
    assert caplog.records[-1].getMessage() == "Manifest file does not exist."


def test_console_sink_prints_without_markup_interpretation():
    console = Console(record=True, width=120)

    console_sink(console)("value [bold]kept[/bold] literally")

    assert "value [bold]kept[/bold] literally" in console.export_text()
