#!/usr/bin/env python
"""Run the on-call sync once from a workstation, using credentials from .env."""
import json
import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

from dotenv import load_dotenv


APP_DIR = Path(__file__).parent / "app"


def build_context() -> MagicMock:
    context = MagicMock()
    context.function_name = "oncall-slack-sync-local"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:local:000000000000:function:oncall-slack-sync-local"
    context.aws_request_id = "oncall-slack-sync-local-run"
    return context


def main() -> None:
    load_dotenv()
    os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "oncall-slack-sync")
    os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"

    # config.yaml is resolved relative to the app directory
    os.chdir(APP_DIR)
    sys.path.insert(0, str(APP_DIR))

    from handler import lambda_handler

    result = lambda_handler({"source": "run_local"}, build_context())
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
