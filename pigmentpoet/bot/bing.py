from __future__ import annotations

from dataclasses import dataclass

import httpx
from PIL import Image

from ..errors import BadSource, PigmentError
from ..imaging import fit_within, open_image

BING_BASE = "https://www.bing.com"
IMAGE_SUFFIX = "_1024x768.jpg"


class ImageOfTheDayError(PigmentError):
    code = "E_IMAGE_OF_THE_DAY"


@dataclass
class ImageOfTheDay:
    image: Image.Image
    title: str
    copyright: str


def image_url_from_archive(data: dict) -> tuple[str, dict]:
    images = data.get("images") or []
    if not images:
        raise ImageOfTheDayError("no images found in Bing response")
    entry = images[0]
    base = entry.get("urlbase") or ""
    if not base:
        raise ImageOfTheDayError("Bing response has no urlbase")
    if not base.startswith("http"):
        base = BING_BASE + base
    return base + IMAGE_SUFFIX, entry


async def fetch_image_of_the_day(
    client: httpx.AsyncClient, archive_url: str, max_px: int = 1600
) -> ImageOfTheDay:
    try:
        r = await client.get(archive_url)
        r.raise_for_status()
        image_url, entry = image_url_from_archive(r.json())
        img_resp = await client.get(image_url)
        img_resp.raise_for_status()
    except (httpx.HTTPError, ValueError) as exc:
        raise ImageOfTheDayError(f"fetch Bing image: {exc}") from exc

    try:
        image = open_image(img_resp.content)
    except BadSource as exc:
        raise ImageOfTheDayError(f"decode Bing image: {exc}") from exc

    return ImageOfTheDay(
        image=fit_within(image, max_px),
        title=entry.get("title") or "",
        copyright=entry.get("copyright") or "",
    )
