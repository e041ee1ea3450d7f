# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

# Docs:
# - https://docs.aws.amazon.com/bedrock-agentcore/latest/devguide/gateway-interceptors-types.html
# - https://docs.aws.amazon.com/bedrock-agentcore/latest/devguide/gateway-interceptors-configuration.html
# - https://docs.aws.amazon.com/bedrock-agentcore/latest/devguide/gateway-headers.html

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger

from gateway_interceptor.models import (
    InterceptorInput,
    InterceptorOutput,
    TransformedGatewayRequest,
    TransformedGatewayResponse,
)

logger = Logger()

INTERCEPTOR_OUTPUT_VERSION = "1.0"
RESERVED_HEADER_PREFIX = "x-amzn"
ARGUMENT_HEADER_PREFIX = "mcp_header_"


def _log_json(log: Any, label: str, value: Any) -> None:
    # Values are normalized to JSON types before reaching the formatter.
    # A logging failure never aborts the transform.
    try:
        log.info(label, extra={"value": json.loads(json.dumps(value, default=str))})
    except Exception:
        try:
            log.warning(f"{label}: <unserializable {type(value).__name__}>")
        except Exception:
            pass


def create_transformed_gateway_response(status_code: int, body: Dict[str, Any]) -> TransformedGatewayResponse:
    """
    Creates a transformed gateway response object.
    This can be used to short-circuit the request and return a response immediately.

    Sample:
        "transformedGatewayResponse": {
            "statusCode": 200,
            "body": {
                "jsonrpc": "2.0",
                "id": 1,
                "result": {"<result_content>": "<result_value>"}
            }
        }
    """
    return {
        "statusCode": status_code,
        "body": body,
    }


def build_interceptor_output(
    transformed_request: TransformedGatewayRequest,
    transformed_response: Optional[TransformedGatewayResponse] = None,
) -> InterceptorOutput:
    """Wraps a transformed request (and optional short-circuit response) in the versioned envelope."""
    mcp: Dict[str, Any] = {"transformedGatewayRequest": transformed_request}
    if transformed_response is not None:
        mcp["transformedGatewayResponse"] = transformed_response
    return {
        "interceptorOutputVersion": INTERCEPTOR_OUTPUT_VERSION,
        "mcp": mcp,
    }


def propagate_headers(
    incoming_headers: Optional[Dict[str, str]] = None,
    additional_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Propagates headers from the incoming request to the outgoing request.

    All incoming headers are forwarded to the target. Additional headers are
    merged on top and take precedence on an exact (case-sensitive) key match.

    Args:
        incoming_headers: Headers received by the gateway
        additional_headers: Headers set by the interceptor

    Returns:
        A new header mapping
    """
    propagated_headers: Dict[str, str] = {}
    propagated_headers.update(incoming_headers or {})
    propagated_headers.update(additional_headers or {})
    return propagated_headers


def filter_and_prefix_headers(headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Filters out headers with the 'x-amzn' prefix and prefixes the remaining
    ones with 'mcp_header_'.

    Args:
        headers: The original headers

    Returns:
        A new mapping with filtered and prefixed headers
    """
    result: Dict[str, str] = {}
    if not headers:
        return result

    for key, value in headers.items():
        if key.lower().startswith(RESERVED_HEADER_PREFIX):
            continue
        result[f"{ARGUMENT_HEADER_PREFIX}{key}"] = value

    return result


def merge_arguments(body: Dict[str, Any], prefixed_headers: Dict[str, str]) -> Dict[str, Any]:
    """
    Returns a copy of the JSON-RPC body with the prefixed headers merged into
    params.arguments. Sibling fields at every level are preserved and the
    original body is left untouched.
    """
    params = body.get("params")
    if not isinstance(params, dict):
        params = {}
    existing_arguments = params.get("arguments")
    if not isinstance(existing_arguments, dict):
        existing_arguments = {}

    return {
        **body,
        "params": {
            **params,
            "arguments": {
                **existing_arguments,
                **prefixed_headers,
            },
        },
    }


def handle_interceptor_request(interceptor_input: InterceptorInput, log: Optional[Any] = None) -> InterceptorOutput:
    """
    Handles the incoming interceptor request.

    Forwards all request headers to the target and injects the non 'x-amzn'
    headers into params.arguments of the JSON-RPC body as 'mcp_header_<name>'.

    Args:
        interceptor_input: The event sent by the AgentCore Gateway
        log: Logger used for diagnostics, defaults to the module logger

    Returns:
        The interceptor output envelope

    Raises:
        KeyError: If the input is missing 'mcp', 'gatewayRequest' or its body
    """
    log = log if log is not None else logger

    _log_json(log, "Interceptor Input", interceptor_input)
    mcp = interceptor_input["mcp"]
    gateway_request = mcp["gatewayRequest"]
    headers = gateway_request.get("headers")
    original_body = gateway_request["body"]

    _log_json(log, "Raw Gateway Request Body", (mcp.get("rawGatewayRequest") or {}).get("body"))
    _log_json(log, "Gateway Request Path", gateway_request.get("path"))
    _log_json(log, "Gateway Request Method", gateway_request.get("httpMethod"))
    _log_json(log, "Gateway Request Headers", headers)
    _log_json(log, "Gateway Request Body", original_body)

    forwarded_headers = propagate_headers(headers)
    _log_json(log, "Propagated Headers", forwarded_headers)

    prefixed_headers = filter_and_prefix_headers(headers)
    _log_json(log, "Filtered and Prefixed Headers", prefixed_headers)

    merged_body = merge_arguments(original_body, prefixed_headers)

    output = build_interceptor_output({
        "headers": forwarded_headers,
        "body": merged_body,
    })

    _log_json(log, "Interceptor Output", output)
    return output
