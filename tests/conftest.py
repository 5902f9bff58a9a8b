import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests


# Disable X-Ray tracing for tests
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"

# Add app directory to path for imports
app_dir = Path(__file__).parent.parent / "app"
sys.path.insert(0, str(app_dir))


@pytest.fixture
def make_response():
    def _make_response(payload=None, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload if payload is not None else {}
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
        return response

    return _make_response


@pytest.fixture
def sample_oncalls_payload():
    return {
        "oncalls": [
            {
                "schedule": {"id": "S1"},
                "user": {"id": "PU1", "summary": "Alice Smith"},
            },
            {
                "schedule": {"id": "S2"},
                "user": {"id": "PU1", "summary": "Alice Smith"},
            },
            {
                "schedule": {"id": "S3"},
                "user": {"id": "PU2", "summary": "Bob Jones"},
            },
            {
                "schedule": None,
                "user": {"id": "PU3", "summary": "No Schedule"},
            },
            {
                "escalation_policy": {"id": "EP1"},
                "schedule": {"id": "S4"},
            },
        ]
    }


@pytest.fixture
def sample_slack_members():
    return [
        {"id": "U001", "name": "alice", "real_name": "Alice Smith", "profile": {"real_name": "Alice Smith"}},
        {"id": "U002", "name": "bjones", "real_name": "Robert Jones", "profile": {"real_name": "Bob Jones"}},
        {"id": "U003", "name": "carol", "real_name": "Carol White", "profile": {"real_name": "Carol White"}},
        {"id": "U004", "name": "Alice Smith", "real_name": "Alice Smith (old)", "profile": {}},
    ]


@pytest.fixture
def mock_lambda_context():
    context = MagicMock()
    context.function_name = "test-function"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
    context.aws_request_id = "test-request-id"
    return context
