# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import traceback
import uuid
from functools import wraps
from typing import Any, Callable, Dict, TypeVar, cast

from aws_lambda_powertools import Logger

logger = Logger()

F = TypeVar('F', bound=Callable[..., Any])

JSON_HEADERS = {"Content-Type": "application/json"}

class AppError(Exception):
    """Base class for application errors"""
    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(self.message)

class ValidationError(AppError):
    """Error raised when the proxied request cannot be used as interceptor input"""
    def __init__(self, message: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(message, error_code, 400)

def handle_error(func: F) -> F:
    """
    Decorator that turns failures of an API Gateway proxy handler into JSON
    error responses.

    Usage:
    @handle_error
    def handle_proxy_event(event, context):
        # Your handler code
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            return func(*args, **kwargs)
        except AppError as e:
            error_id = str(uuid.uuid4())
            logger.error({
                "error_id": error_id,
                "error_type": e.__class__.__name__,
                "error_code": e.error_code,
                "error_message": e.message,
                "status_code": e.status_code
            })
            return {
                "statusCode": e.status_code,
                "headers": dict(JSON_HEADERS),
                "body": json.dumps({
                    "error": e.message,
                    "error_code": e.error_code,
                    "error_id": error_id
                })
            }
        except Exception as e:
            error_id = str(uuid.uuid4())
            logger.error({
                "error_id": error_id,
                "error_type": e.__class__.__name__,
                "error_message": str(e),
                "stacktrace": traceback.format_exc()
            })
            return {
                "statusCode": 500,
                "headers": dict(JSON_HEADERS),
                "body": json.dumps({
                    "error": "Internal server error",
                    "error_id": error_id
                })
            }

    return cast(F, wrapper)

def validate_required_fields(data: Any, required_fields: list) -> None:
    """
    Validates that data is a JSON object holding all required fields

    Args:
        data: The data to validate
        required_fields: List of required field names

    Raises:
        ValidationError: If data is not an object or any required field is missing
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    missing_fields = [field for field in required_fields if field not in data or data[field] is None]
    if missing_fields:
        raise ValidationError(f"Missing required fields: {', '.join(missing_fields)}")
