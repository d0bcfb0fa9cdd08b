"""
Invocation adapters for hosts other than the HTTP API.

``invocation`` holds the host-independent request handling shared by
every adapter; ``lambda_handler`` exposes it to AWS Lambda behind an
API Gateway proxy integration.
"""
