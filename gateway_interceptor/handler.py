# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
from typing import Any, Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.event_handler import (APIGatewayRestResolver, CORSConfig, Response, content_types)
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from gateway_interceptor.error_handling import ValidationError, handle_error, validate_required_fields
from gateway_interceptor.request_interceptor import handle_interceptor_request

tracer = Tracer()
logger = Logger()
cors_config = CORSConfig(allow_origin="*", max_age=300)
app = APIGatewayRestResolver(cors=cors_config)


def is_interceptor_input(event: Any) -> bool:
    """Checks if the event is an InterceptorInput sent directly by the AgentCore Gateway"""
    return (
        isinstance(event, dict)
        and "interceptorInputVersion" in event
        and "mcp" in event
    )


def _json_body() -> Any:
    body = app.current_event.body
    if not body:
        return {}
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Request body is not valid JSON: {e.msg}")


# Echo endpoint for testing
@app.post("/echo")
def echo():
    return Response(
        status_code=200,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(_json_body()),
    )


# Request interceptor endpoint (for testing via API Gateway)
@app.post("/intercept")
def intercept():
    interceptor_input = _json_body()
    validate_required_fields(interceptor_input, ["interceptorInputVersion", "mcp"])
    return handle_interceptor_request(interceptor_input)


@app.not_found
def handle_not_found(exc: NotFoundError) -> Response:
    logger.info(f"No route for {app.current_event.http_method} {app.current_event.path}")
    return Response(
        status_code=404,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps({"message": "Not Found"}),
    )


@handle_error
def handle_proxy_event(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return app.resolve(event, context)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST, log_event=True)
@tracer.capture_lambda_handler
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    # Direct Lambda invocation from AgentCore Gateway
    if is_interceptor_input(event):
        logger.info("Processing as InterceptorInput (direct Lambda invocation)")
        return handle_interceptor_request(event)

    logger.info("Processing as API Gateway proxy request")
    return handle_proxy_event(event, context)
