# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""Shapes of the AgentCore Gateway interceptor contract (interceptorInputVersion / interceptorOutputVersion 1.0)."""

from typing import Any, Dict, TypedDict


# Input types

class RawGatewayRequest(TypedDict):
    body: str


class _GatewayRequestBase(TypedDict):
    path: str
    httpMethod: str
    body: Dict[str, Any]


class GatewayRequest(_GatewayRequestBase, total=False):
    headers: Dict[str, str]


class InterceptorMcpInput(TypedDict):
    rawGatewayRequest: RawGatewayRequest
    gatewayRequest: GatewayRequest


class InterceptorInput(TypedDict):
    interceptorInputVersion: str
    mcp: InterceptorMcpInput


# Output types

class _TransformedGatewayRequestBase(TypedDict):
    body: Dict[str, Any]


class TransformedGatewayRequest(_TransformedGatewayRequestBase, total=False):
    headers: Dict[str, str]


class TransformedGatewayResponse(TypedDict):
    statusCode: int
    body: Dict[str, Any]


class _InterceptorMcpOutputBase(TypedDict):
    transformedGatewayRequest: TransformedGatewayRequest


class InterceptorMcpOutput(_InterceptorMcpOutputBase, total=False):
    transformedGatewayResponse: TransformedGatewayResponse


class InterceptorOutput(TypedDict):
    interceptorOutputVersion: str
    mcp: InterceptorMcpOutput
