"""File sinks for the account database and reports."""

from bankacct.sinks.flat_file import FlatFileSink
from bankacct.sinks.report import ReportSink

__all__ = ["FlatFileSink", "ReportSink"]
