import json
import logging

import azure.functions as func
from azure.eventhub import EventData
from azure.eventhub.aio import EventHubProducerClient

from .config import EventHubSettings
from .errors import ConfigurationMissing, ErrorKind, EventTooLargeError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Hello EventHub!"


def read_message(req: func.HttpRequest) -> str:
    body = req.get_body() or b""
    text = body.decode("utf-8")
    return text or DEFAULT_MESSAGE


async def main(req: func.HttpRequest) -> func.HttpResponse:
    logger.info("Python HTTP trigger function processed a request.")

    try:
        settings = EventHubSettings.from_env()
    except ConfigurationMissing as exc:
        return func.HttpResponse(
            str(exc),
            status_code=ErrorKind.CONFIGURATION_MISSING.status_code,
            mimetype="text/plain",
        )

    try:
        producer = EventHubProducerClient.from_connection_string(
            settings.connection_string, eventhub_name=settings.eventhub_name
        )
        async with producer:
            message = read_message(req)

            batch = await producer.create_batch()
            try:
                batch.add(EventData(message))
            except ValueError:
                raise EventTooLargeError("Event is too large for the batch.")

            await producer.send_batch(batch)
    except Exception as exc:
        logger.error("Error sending message to EventHub: %s", exc)
        return func.HttpResponse(status_code=ErrorKind.classify(exc).status_code)

    logger.info("Successfully sent message to EventHub: %s", message)

    payload = {
        "status": "success",
        "message": "Event sent to EventHub successfully",
        "eventData": message,
    }
    return func.HttpResponse(json.dumps(payload), status_code=200, mimetype="application/json")
