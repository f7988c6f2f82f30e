from __future__ import annotations

import asyncio
import random
from typing import Optional

import httpx
import structlog

from ..core.config import Settings, get_settings
from ..imaging import fit_within, open_image
from ..matcher import ColorMatcher, load_default_matcher
from ..palette import Palette, palette_from_image, random_palette
from ..render import PaletteRenderer, default_renderer
from .bing import fetch_image_of_the_day
from .platform import IncomingPost, Platform


log = structlog.get_logger(__name__)

IMAGE_OF_THE_DAY_TAGS = ["Color", "Bing", "Design"]


class PaletteBot:
    """Posts palettes on a schedule and answers tagged posts.

    The color engine is synchronous; rendering and extraction run in worker
    threads so a busy firehose does not stall the event loop.
    """

    def __init__(
        self,
        platform: Platform,
        *,
        matcher: ColorMatcher | None = None,
        renderer: PaletteRenderer | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.platform = platform
        self.matcher = matcher or load_default_matcher()
        self.renderer = renderer or default_renderer()
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.http_client = http_client

    def is_trigger(self, post: IncomingPost) -> bool:
        wanted = self.settings.trigger_tag.lstrip("#").lower()
        return any(tag.lstrip("#").lower() == wanted for tag in post.tags)

    async def generate_and_post(self) -> Palette:
        await self.platform.refresh_session()
        palette = random_palette(self.matcher, self.rng)
        await self._publish(palette, self.settings.post_tag_list)
        return palette

    async def post_image_of_the_day(self) -> Palette:
        await self.platform.refresh_session()
        if self.http_client is not None:
            daily = await fetch_image_of_the_day(
                self.http_client, self.settings.bing_image_url, self.settings.max_image_px
            )
        else:
            async with httpx.AsyncClient(timeout=self.settings.http_timeout) as client:
                daily = await fetch_image_of_the_day(
                    client, self.settings.bing_image_url, self.settings.max_image_px
                )

        palette = await asyncio.to_thread(
            palette_from_image, daily.image, self.matcher, self.settings.palette_size
        )
        await self._publish(palette, IMAGE_OF_THE_DAY_TAGS, title=daily.title, source=daily.image)
        return palette

    async def handle_tagged_post(self, post: IncomingPost) -> Palette:
        """Reply material for a tagged post: its image, else its parent's, else random."""
        if post.image_refs:
            data = await self.platform.download_image(post.image_refs[0], post.repo)
            return await self._post_from_image_bytes(data)

        if post.reply_parent_uri:
            try:
                parent = await self.platform.get_post(post.reply_parent_uri)
            except Exception as exc:
                # An unreachable parent counts as one without an image
                log.warning("parent_lookup_failed", uri=post.reply_parent_uri, error=str(exc))
                parent = None
            if parent is not None and parent.image_refs:
                data = await self.platform.download_image(parent.image_refs[0], parent.repo)
                return await self._post_from_image_bytes(data)

        return await self.generate_and_post()

    async def on_post(self, post: IncomingPost) -> Optional[Palette]:
        """Firehose entry point; failures are logged so the stream keeps flowing."""
        if not self.is_trigger(post):
            return None
        try:
            return await self.handle_tagged_post(post)
        except Exception:
            log.exception("tagged_post_failed", uri=post.uri)
            return None

    async def _post_from_image_bytes(self, data: bytes) -> Palette:
        image = fit_within(await asyncio.to_thread(open_image, data), self.settings.max_image_px)
        palette = await asyncio.to_thread(
            palette_from_image, image, self.matcher, self.settings.palette_size
        )
        await self._publish(palette, self.settings.post_tag_list)
        return palette

    async def _publish(self, palette: Palette, tags, title: str | None = None, source=None) -> None:
        image = await asyncio.to_thread(palette.to_image, True, True, source, self.renderer)
        text = palette.caption(title)
        await self.platform.publish(text, image, list(tags))
        log.info(
            "palette_posted",
            rule=palette.label,
            colors=list(palette.hex_codes),
            tags=list(tags),
            image_bytes=len(image),
        )
