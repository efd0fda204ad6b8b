# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for social media platform specifications."""

import uuid

import pytest

from testnest.data.memory import InMemoryRepository
from testnest.domain import SocialMediaId, SocialMediaPlatform
from testnest.specifications import social_media_platform_by_id, social_media_platform_specification


@pytest.fixture
def platforms() -> list[SocialMediaPlatform]:
    return [
        SocialMediaPlatform(id=SocialMediaId(uuid.UUID(int=2)), name="Facebook", platform_url="https://facebook.com"),
        SocialMediaPlatform(id=SocialMediaId(uuid.UUID(int=1)), name="LinkedIn", platform_url="https://linkedin.com"),
        SocialMediaPlatform(id=SocialMediaId(uuid.UUID(int=3)), name="X", platform_url="https://x.com"),
    ]


class TestSocialMediaPlatformSpecification:
    @pytest.mark.asyncio
    async def test_default_order(self, platforms):
        repo = InMemoryRepository(SocialMediaPlatform, platforms)
        items = await repo.find_all_by_spec(social_media_platform_specification())
        assert [p.name for p in items] == ["LinkedIn", "Facebook", "X"]

    @pytest.mark.asyncio
    async def test_url_filter(self, platforms):
        repo = InMemoryRepository(SocialMediaPlatform, platforms)
        spec = social_media_platform_specification(platform_url="LINKEDIN")
        assert [p.name for p in await repo.find_all_by_spec(spec)] == ["LinkedIn"]

    @pytest.mark.asyncio
    async def test_sort_by_name(self, platforms):
        repo = InMemoryRepository(SocialMediaPlatform, platforms)
        spec = social_media_platform_specification(sort_by="Name", sort_direction="desc")
        assert [p.name for p in await repo.find_all_by_spec(spec)] == ["X", "LinkedIn", "Facebook"]

    @pytest.mark.asyncio
    async def test_malformed_id_is_ignored(self, platforms):
        repo = InMemoryRepository(SocialMediaPlatform, platforms)
        spec = social_media_platform_specification(social_media_id="123", name="book")
        assert [p.name for p in await repo.find_all_by_spec(spec)] == ["Facebook"]

    def test_by_id(self, platforms):
        spec = social_media_platform_by_id(SocialMediaId(uuid.UUID(int=3)))
        assert [p.name for p in platforms if spec.is_satisfied_by(p)] == ["X"]
