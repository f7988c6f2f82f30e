"""
Palette extraction from raster images.

The median-cut extractor is the one used for posts: it oversamples to twice
the requested count, then drops representatives that sit too close to an
already-kept color, so one busy region of the image cannot fill the palette.
"""
import math

import numpy as np
from sklearn.cluster import KMeans

from ..color import RGB, rgb_array_to_lab, rgb_distance
from ..errors import check_cancelled

MIN_COLORS = 2
MAX_COLORS = 256
OVERSAMPLE = 2
MIN_DISTANCE = 60  # RGB euclidean, 0-255 scale

KMEANS_MAX_ITER = 20
KMEANS_TARGET_SAMPLES = 1000


def clamp_count(n):
    return max(MIN_COLORS, min(MAX_COLORS, int(n)))


def sample_pixels(image):
    """Return an (N, 3) uint8 array of every pixel with alpha > 0."""
    rgba = np.asarray(image.convert("RGBA")).reshape(-1, 4)
    return rgba[rgba[:, 3] > 0][:, :3]


class _Box:
    """Axis-aligned RGB box over a slice of samples."""

    __slots__ = ("samples", "lo", "hi", "volume")

    def __init__(self, samples):
        self.samples = samples
        self.lo = samples.min(axis=0).astype(np.int64)
        self.hi = samples.max(axis=0).astype(np.int64)
        self.volume = int(np.prod(self.hi - self.lo + 1))

    def can_split(self):
        # volume 1 means every sample is the same color
        return len(self.samples) > 1 and self.volume > 1

    def split(self):
        channel = int(np.argmax(self.hi - self.lo))
        order = np.argsort(self.samples[:, channel], kind="stable")
        ordered = self.samples[order]
        mid = len(ordered) // 2
        return _Box(ordered[:mid]), _Box(ordered[mid:])

    def average(self):
        total = self.samples.sum(axis=0, dtype=np.int64)
        r, g, b = (int(v) for v in total // len(self.samples))
        return RGB(r, g, b)


def median_cut(samples, max_boxes, cancel=None):
    boxes = [_Box(samples)]
    while len(boxes) < max_boxes:
        splittable = [i for i, box in enumerate(boxes) if box.can_split()]
        if not splittable:
            break
        # max() keeps the first index on equal volumes
        idx = max(splittable, key=lambda i: boxes[i].volume)
        boxes[idx : idx + 1] = boxes[idx].split()
        check_cancelled(cancel, "box splitting")
    return boxes


def filter_similar(colors, min_distance=MIN_DISTANCE):
    """Keep colors in order, skipping any closer than ``min_distance`` to a kept one."""
    kept = []
    for color in colors:
        if all(rgb_distance(color, other) >= min_distance for other in kept):
            kept.append(color)
    return kept


def extract_palette(image, n=5, cancel=None):
    """Extract up to ``n`` distinct colors from ``image`` with median cut.

    Args:
        image: PIL image in any mode; fully transparent pixels are ignored
        n: Target count, clamped to 2..256
        cancel: Optional signal with ``is_set()``; raises Cancelled when set

    Returns:
        list of RGB tuples, possibly fewer than ``n`` and empty for an image
        without visible pixels
    """
    n = clamp_count(n)
    samples = sample_pixels(image)
    check_cancelled(cancel, "sampling")
    if len(samples) == 0:
        return []

    boxes = median_cut(samples, n * OVERSAMPLE, cancel)
    representatives = [box.average() for box in boxes]
    return filter_similar(representatives)[:n]


def extract_palette_kmeans(image, n=5, seed=0, cancel=None):
    """Alternative extractor: k-means++ over L*a*b* values of a sampling grid.

    Each centroid is reported as the closest sampled pixel, so every color
    returned actually occurs in the image. ``seed`` fixes the k-means++ draw.
    """
    n = clamp_count(n)
    rgba = np.asarray(image.convert("RGBA"))
    height, width = rgba.shape[:2]
    step = max(1, int(math.sqrt(width * height / KMEANS_TARGET_SAMPLES)))
    grid = rgba[::step, ::step].reshape(-1, 4)
    rgb = grid[grid[:, 3] > 0][:, :3]
    check_cancelled(cancel, "sampling")
    if len(rgb) == 0:
        return []

    lab = rgb_array_to_lab(rgb)
    n_clusters = min(n, len(np.unique(rgb, axis=0)))
    kmeans = KMeans(
        n_clusters=n_clusters,
        init="k-means++",
        n_init=1,
        max_iter=KMEANS_MAX_ITER,
        random_state=seed,
    )
    kmeans.fit(lab)
    check_cancelled(cancel, "clustering")

    colors = []
    for center in kmeans.cluster_centers_:
        idx = int(np.argmin(np.linalg.norm(lab - center, axis=1)))
        r, g, b = (int(c) for c in rgb[idx])
        colors.append(RGB(r, g, b))
    return colors
