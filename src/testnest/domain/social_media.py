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
"""Social media platform entity."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from testnest.data.relational.sqlalchemy.entity import BaseEntity
from testnest.data.relational.sqlalchemy.types import TypedIdType
from testnest.domain.ids import SocialMediaId


class SocialMediaPlatform(BaseEntity):
    __tablename__ = "social_media_platforms"

    id: Mapped[SocialMediaId] = mapped_column(TypedIdType(SocialMediaId), primary_key=True, default=SocialMediaId.new)
    name: Mapped[str] = mapped_column(String(100))
    platform_url: Mapped[str] = mapped_column(String(255))
