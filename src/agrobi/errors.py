"""Exception hierarchy shared by the data, forecast and integration layers."""

from __future__ import annotations


class AgroBIError(Exception):
    """Base class for all project errors."""


class NoHistoricalDataError(AgroBIError, ValueError):
    """No reported month is available to anchor a forecast.

    Callers must surface this as an "insufficient data" state instead of
    rendering an empty or zero-valued chart.
    """


class MalformedRecordError(AgroBIError, ValueError):
    """A raw price row has an unparsable date or an invalid price."""


class ConnectorError(AgroBIError):
    """A data source is missing or lacks the required columns."""


class LLMError(AgroBIError):
    """The generative-AI request failed or returned unusable content."""
