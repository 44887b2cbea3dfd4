"""Unit tests for Result and the returns_result decorator."""

import pytest

from keyward_identity import (
    ErrorKind,
    InfrastructureError,
    InvalidCredentialsError,
    Result,
)
from keyward_identity.application.result import returns_result


class TestResult:
    def test_success(self):
        result = Result.success(42)

        assert result.ok
        assert result.value == 42
        assert result.error is None
        assert result.error_kind is None
        assert result.unwrap() == 42

    def test_failure(self):
        error = InvalidCredentialsError()
        result = Result.failure(error)

        assert not result.ok
        assert result.error is error
        assert result.error_kind == ErrorKind.AUTH

    def test_unwrap_failure_raises_error(self):
        result = Result.failure(InvalidCredentialsError())

        with pytest.raises(InvalidCredentialsError, match="Invalid username or password"):
            result.unwrap()

    def test_success_with_none_value_is_ok(self):
        assert Result.success(None).ok


class TestReturnsResult:
    @pytest.mark.asyncio
    async def test_wraps_return_value(self):
        @returns_result
        async def operation():
            return "done"

        result = await operation()

        assert result.ok
        assert result.value == "done"

    @pytest.mark.asyncio
    async def test_converts_identity_errors(self):
        @returns_result
        async def operation():
            raise InvalidCredentialsError

        result = await operation()

        assert isinstance(result.error, InvalidCredentialsError)

    @pytest.mark.asyncio
    async def test_infrastructure_errors_propagate(self):
        @returns_result
        async def operation():
            raise InfrastructureError

        with pytest.raises(InfrastructureError):
            await operation()

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self):
        @returns_result
        async def operation():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await operation()
