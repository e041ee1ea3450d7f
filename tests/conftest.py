"""Shared fixtures for the gateway interceptor tests."""

import os
from dataclasses import dataclass

import pytest

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "gateway-interceptor")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")


@dataclass
class FakeLambdaContext:
    function_name: str = "gateway-interceptor"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:gateway-interceptor"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    log_group_name: str = "/aws/lambda/gateway-interceptor"
    log_stream_name: str = "2026/10/18/[$LATEST]abcdef"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def interceptor_input():
    """A tools/call request as sent by the AgentCore Gateway with passRequestHeaders enabled."""
    return {
        "interceptorInputVersion": "1.0",
        "mcp": {
            "rawGatewayRequest": {
                "body": '{"jsonrpc":"2.0","id":1,"method":"tools/call","params":{"name":"get_tasks","arguments":{"limit":5}}}'
            },
            "gatewayRequest": {
                "path": "/mcp",
                "httpMethod": "POST",
                "headers": {
                    "Authorization": "Bearer t",
                    "Mcp-Session-Id": "session-123",
                    "X-Amzn-Trace-Id": "Root=1-abc",
                    "x-amzn-bedrock-agentcore-runtime": "1",
                },
                "body": {
                    "jsonrpc": "2.0",
                    "id": 1,
                    "method": "tools/call",
                    "params": {"name": "get_tasks", "arguments": {"limit": 5}},
                },
            },
        },
    }


def make_proxy_event(path, method="POST", body=None):
    """Builds a minimal API Gateway REST proxy event."""
    return {
        "resource": path,
        "path": path,
        "httpMethod": method,
        "headers": {"Content-Type": "application/json"},
        "multiValueHeaders": {"Content-Type": ["application/json"]},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "resourcePath": path,
            "httpMethod": method,
            "path": f"/test{path}",
            "stage": "test",
        },
        "body": body,
        "isBase64Encoded": False,
    }


@pytest.fixture
def proxy_event():
    return make_proxy_event
