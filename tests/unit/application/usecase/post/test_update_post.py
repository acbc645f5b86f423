"""Unit tests for UpdatePostUseCase and DeletePostUseCase."""

import pytest

from board.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from board.domain.error import NotFoundError
from tests.conftest import seed_file, seed_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_title_and_content(self, unit_env):
        """Only the given fields change."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id, title="Before", category="free")

        # Act
        response = await use_case.execute(
            UpdatePostRequest(post_id=post.id, title="After")
        )

        # Assert
        assert response.title == "After"
        assert response.content == post.content
        assert response.category == "free"

    @pytest.mark.asyncio
    async def test_empty_file_list_detaches_everything(self, unit_env):
        """file_ids=[] removes all attachments."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)
        await seed_file(unit_env, post.id)

        # Act
        response = await use_case.execute(
            UpdatePostRequest(post_id=post.id, file_ids=[])
        )

        # Assert
        assert response.files == []

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env):
        """Unknown posts raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(UpdatePostRequest(post_id=1, title="x"))


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_deleted_post_is_no_longer_readable(self, unit_env):
        """After deletion, reads raise NotFoundError."""
        # Arrange
        delete_use_case = await unit_env.get(DeletePostUseCase)
        get_use_case = await unit_env.get(GetPostUseCase)
        user = await seed_user(unit_env)
        post = await seed_post(unit_env, user.id)

        # Act
        response = await delete_use_case.execute(DeletePostRequest(post_id=post.id))

        # Assert
        assert response.post_id == post.id
        assert response.deleted_at is not None
        with pytest.raises(NotFoundError):
            await get_use_case.execute(GetPostRequest(post_id=post.id))
