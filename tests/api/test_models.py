"""Tests for API request/response models."""

import pytest
from pydantic import ValidationError

from api.models import ComposeRequest, OperationResponse, PlanRequest, ValidateRequest


def test_operation_response_defaults():
    resp = OperationResponse(success=True, tool="compose")
    assert resp.result is None
    assert resp.error is None


def test_validate_request_defaults():
    req = ValidateRequest(document={})
    assert req.policy is None
    assert req.strict is False


def test_policy_must_be_known():
    assert ComposeRequest(document={}, policy="sequential").policy == "sequential"
    with pytest.raises(ValidationError):
        ComposeRequest(document={}, policy="backwards")


def test_plan_request_requires_script():
    with pytest.raises(ValidationError):
        PlanRequest(script="")
