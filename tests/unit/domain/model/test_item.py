"""Unit tests for the Item entity."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from soular.domain.value import LikeState, ParentId, UserId
from tests.conftest import make_item


class TestItem:
    """Tests for Item invariants and helpers."""

    def test_rejects_negative_like_count(self):
        with pytest.raises(ValidationError):
            make_item(ParentId(uuid4()), like_count=-1)

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rejects_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            make_item(ParentId(uuid4()), rating=rating)

    def test_rejects_empty_body(self):
        with pytest.raises(ValidationError):
            make_item(ParentId(uuid4()), body="")

    def test_rejects_update_before_creation(self):
        item = make_item(ParentId(uuid4()))
        with pytest.raises(ValidationError):
            item.model_validate(
                {
                    **item.model_dump(),
                    "updated_at": item.created_at - timedelta(seconds=1),
                }
            )

    def test_is_edited(self):
        item = make_item(ParentId(uuid4()))
        assert item.is_edited is False

        edited = item.model_copy(
            update={"updated_at": item.created_at + timedelta(minutes=3)}
        )
        assert edited.is_edited is True

    def test_is_authored_by(self):
        author = UserId(uuid4())
        item = make_item(ParentId(uuid4()), author_id=author)

        assert item.is_authored_by(author)
        assert not item.is_authored_by(UserId(uuid4()))

    def test_with_like_delta_is_reversible(self):
        """Applying a delta and its inverse returns the original item."""
        item = make_item(ParentId(uuid4()), like_count=2)

        liked = item.with_like_delta(True, 1)
        assert liked.like_state == LikeState.LIKED
        assert liked.like_count == 3
        assert item.like_count == 2  # original untouched

        assert liked.with_like_delta(False, -1) == item

    def test_is_immutable(self):
        item = make_item(ParentId(uuid4()))
        with pytest.raises(ValidationError):
            item.like_count = 10
