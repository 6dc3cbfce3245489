"""Unit tests for the exception hierarchy."""

from core.exceptions import BadRequestError, ColorAPIError, DatabaseConnectionError, NotFoundError
from foundation.exceptions import UpstreamError


class TestExceptionHierarchy:
    """Test suite for core exceptions."""

    def test_all_errors_are_color_api_errors(self) -> None:
        for error_type in (BadRequestError, NotFoundError, DatabaseConnectionError):
            assert issubclass(error_type, ColorAPIError)

    def test_database_connection_error_is_upstream_error(self) -> None:
        """Test that circuit breaker rejections can raise DatabaseConnectionError.

        **Why this test is important:**
          - The breaker decorator only accepts UpstreamError subclasses
        """
        assert issubclass(DatabaseConnectionError, UpstreamError)

    def test_client_errors_are_not_upstream_errors(self) -> None:
        assert not issubclass(BadRequestError, UpstreamError)
        assert not issubclass(NotFoundError, UpstreamError)
