from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass
class IncomingPost:
    uri: str
    repo: str
    text: str = ""
    tags: List[str] = field(default_factory=list)
    image_refs: List[str] = field(default_factory=list)
    reply_parent_uri: Optional[str] = None


class Platform(Protocol):
    """What the bot needs from a social platform client."""

    async def refresh_session(self) -> None: ...

    async def publish(self, text: str, image: bytes, tags: List[str]) -> None: ...

    async def download_image(self, ref: str, repo: str) -> bytes: ...

    async def get_post(self, uri: str) -> Optional[IncomingPost]: ...
