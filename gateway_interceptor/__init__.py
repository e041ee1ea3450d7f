# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from gateway_interceptor.request_interceptor import (
    build_interceptor_output,
    create_transformed_gateway_response,
    filter_and_prefix_headers,
    handle_interceptor_request,
    merge_arguments,
    propagate_headers,
)

__all__ = [
    "build_interceptor_output",
    "create_transformed_gateway_response",
    "filter_and_prefix_headers",
    "handle_interceptor_request",
    "merge_arguments",
    "propagate_headers",
]
