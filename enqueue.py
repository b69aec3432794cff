"""AWS Lambda handler for HTTP to SQS enqueue."""

import base64
import binascii
import json
import logging

import boto3

from config import QUEUE_URL, LOG_LEVEL

logger = logging.getLogger()
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

_sqs = None


def get_sqs_client():
    """Create the SQS client on first use."""
    global _sqs
    if _sqs is None:
        _sqs = boto3.client("sqs")
    return _sqs


def _error(status_code: int, message: str) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": message}),
    }


def handler(event, context):
    """
    HTTP to SQS proxy.

    Receives HTTP request and queues the body to SQS, where the Face API
    forwarder picks it up.
    """
    if not QUEUE_URL:
        raise RuntimeError("QUEUE_URL is not configured")

    body = event.get("body") or "{}"

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
        message = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Rejected request with malformed body: %s", e)
        return _error(400, f"Invalid request body: {e}")

    if not isinstance(message, dict):
        return _error(400, "Body must be a JSON object")

    response = get_sqs_client().send_message(QueueUrl=QUEUE_URL, MessageBody=body)
    logger.info("Queued message %s", response["MessageId"])

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"status": "queued", "messageId": response["MessageId"]}),
    }
