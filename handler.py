"""AWS Lambda handler forwarding SQS messages to the Face API."""

import json
import logging

from clients import FaceApiClient
from config import FACE_API_URL, FACE_API_TIMEOUT, LOG_LEVEL
from models import records_from_event

logger = logging.getLogger()
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

COMPLETED_MESSAGE = "Processing completed."


def configure_local_logging():
    """Attach a console handler at the level already resolved for the root logger."""
    logging.basicConfig(level=logger.level)


def lambda_handler(event, context):
    """
    AWS Lambda handler - triggered by SQS.

    Input event:
    {
        "Records": [
            {"messageId": "...", "body": "{\"image_url\": \"https://...\"}"}
        ]
    }

    Each record body is decoded and POSTed to the Face API, one at a time
    in delivery order. Any failure stops the batch and is re-raised so SQS
    applies its own redelivery policy.
    """
    request_id = getattr(context, "aws_request_id", "") if context else ""
    logger.info("Received event (request_id=%s): %s", request_id, json.dumps(event, indent=2))

    face_api_client = FaceApiClient(FACE_API_URL, timeout=FACE_API_TIMEOUT)

    try:
        for record in records_from_event(event):
            message_body = record.payload()
            logger.info("Processing message %s: %s", record.message_id, message_body)

            face_api_response = face_api_client.analyze(message_body)
            logger.info("Face API response: %s", face_api_response)

    except Exception:
        logger.exception("Error processing messages (request_id=%s)", request_id)
        raise

    return {
        "statusCode": 200,
        "body": json.dumps({"message": COMPLETED_MESSAGE}),
    }


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python handler.py <message_json> [<message_json> ...]")
        print()
        print("Each argument becomes the body of one SQS record.")
        print()
        print("Example:")
        print('  python handler.py \'{"image_url": "https://example.com/face.jpg"}\'')
        sys.exit(1)

    configure_local_logging()

    event = {
        "Records": [
            {"messageId": f"local-{i}", "body": body}
            for i, body in enumerate(sys.argv[1:], start=1)
        ]
    }

    result = lambda_handler(event, None)
    print("\nResult:")
    print(json.dumps(json.loads(result["body"]), indent=2))
