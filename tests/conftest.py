"""Pytest configuration and fixtures for the consistently-interactive tests."""

import pytest

from consistently_interactive.models import TraceOfTab


@pytest.fixture
def trace_of_tab() -> TraceOfTab:
    """Trace timestamps with navigation at 0 and FMP at 1s over a 30s trace."""
    return TraceOfTab(
        timestamps={
            "navigation_start": 0,
            "first_meaningful_paint": 1000,
            "dom_content_loaded": 500,
            "trace_end": 30000,
        }
    )


@pytest.fixture
def sample_artifacts() -> dict:
    """Artifact bundle in the gatherer's camelCase wire format."""
    return {
        "traceOfTab": {
            "timestamps": {
                "navigationStart": 0,
                "firstMeaningfulPaint": 1000,
                "domContentLoaded": 800,
                "traceEnd": 30000,
            }
        },
        "networkRecords": [
            {"url": "https://example.com/", "startTime": 0.0, "endTime": 0.5},
            {"url": "https://example.com/app.js", "startTime": 0.2, "endTime": 2.0},
            {"url": "https://example.com/style.css", "startTime": 0.3, "endTime": 1.5},
            {"url": "https://cdn.example.com/font.woff2", "startTime": 0.4, "endTime": 3.0},
            {"url": "data:image/png;base64,AAAA", "startTime": 0.5, "endTime": 25.0},
        ],
        "mainThreadEvents": [
            {"start": 100, "end": 130},
            {"start": 1500, "end": 1700},
            {"start": 600, "end": 900},
        ],
    }
