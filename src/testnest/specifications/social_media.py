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
"""Specifications for social media platforms."""

from __future__ import annotations

from testnest.data.specification import Specification
from testnest.domain.ids import SocialMediaId
from testnest.domain.social_media import SocialMediaPlatform
from testnest.specifications.builder import EntityTable, FilterField, MatchKind, build_specification, by_identity

SOCIAL_MEDIA_PLATFORM_TABLE = EntityTable(
    SocialMediaPlatform,
    filters=(
        FilterField("social_media_id", "id", MatchKind.TYPED_ID, SocialMediaId),
        FilterField("name", "name"),
        FilterField("platform_url", "platform_url"),
    ),
    sort_fields={"name": "name", "platformurl": "platform_url", "socialmediaid": "id", "id": "id"},
)


def social_media_platform_specification(
    *,
    social_media_id: str | SocialMediaId | None = None,
    name: str | None = None,
    platform_url: str | None = None,
    sort_by: str | None = None,
    sort_direction: str = "asc",
    page_number: int | None = None,
    page_size: int | None = None,
) -> Specification[SocialMediaPlatform]:
    return build_specification(
        SOCIAL_MEDIA_PLATFORM_TABLE,
        {"social_media_id": social_media_id, "name": name, "platform_url": platform_url},
        sort_by=sort_by,
        sort_direction=sort_direction,
        page_number=page_number,
        page_size=page_size,
    )


def social_media_platform_by_id(social_media_id: SocialMediaId) -> Specification[SocialMediaPlatform]:
    return by_identity(SOCIAL_MEDIA_PLATFORM_TABLE, social_media_id)
