from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from container import Container
from sync import SyncResult


logger = Logger()
tracer = Tracer()

container = Container()


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Scheduled on-call sync. Triggered by EventBridge."""
    logger.info("Starting on-call sync")

    try:
        result = container.oncall_sync().run()
    except ValidationError as e:
        logger.exception("Invalid sync configuration")
        return SyncResult(status="failed", error=str(e)).model_dump()
    except Exception as e:
        logger.exception("Error running on-call sync")
        return SyncResult(status="failed", error=str(e)).model_dump()

    logger.info("On-call sync complete", extra={"status": result.status})
    return result.model_dump()
