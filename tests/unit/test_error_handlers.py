"""
Unit tests for the domain-error fallback handler.
"""
import json
from unittest.mock import MagicMock

import pytest

from users_api.api.error_handlers import users_api_error_handler
from users_api.domain.exceptions import (
    IdGenerationError,
    UserNotFoundError,
    UsersApiError,
    ValidationError,
)


class TestUsersApiErrorHandler:
    """Tests for users_api_error_handler"""

    @pytest.mark.asyncio
    async def test_validation_error_returns_field_errors(self):
        response = await users_api_error_handler(
            MagicMock(), ValidationError({"bio": ["too short"]})
        )
        assert response.status_code == 400
        assert json.loads(response.body) == {"bio": ["too short"]}

    @pytest.mark.asyncio
    async def test_not_found_returns_404(self):
        response = await users_api_error_handler(MagicMock(), UserNotFoundError("abc"))
        assert response.status_code == 404
        assert json.loads(response.body) == {"error": "user with id: abc not found"}

    @pytest.mark.asyncio
    async def test_id_generation_error_returns_500(self):
        response = await users_api_error_handler(MagicMock(), IdGenerationError("no entropy"))
        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_other_errors_return_500(self):
        response = await users_api_error_handler(MagicMock(), UsersApiError("boom"))
        assert response.status_code == 500
        assert "error" in json.loads(response.body)
