from .bing import ImageOfTheDay, ImageOfTheDayError, fetch_image_of_the_day
from .platform import IncomingPost, Platform
from .service import PaletteBot

__all__ = [
    "ImageOfTheDay",
    "ImageOfTheDayError",
    "fetch_image_of_the_day",
    "IncomingPost",
    "Platform",
    "PaletteBot",
]
