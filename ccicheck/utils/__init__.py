"""Utility helpers"""

from ccicheck.utils.sinks import InfoSink, CollectingSink, console_sink, log_sink

__all__ = ["InfoSink", "CollectingSink", "console_sink", "log_sink"]
