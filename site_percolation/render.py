"""Matplotlib rendering helpers for percolation grids."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import imageio.v2 as imageio
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from scipy import ndimage

from .constants import CLOSED_COLOR, FRAME_DPI, GIF_FPS, OPEN_COLOR, SPANNING_COLOR
from .grid import Percolation

CLOSED, OPEN, SPANNING = 0, 1, 2
_CMAP = ListedColormap([CLOSED_COLOR, OPEN_COLOR, SPANNING_COLOR])

# 4-neighbourhood, matching the adjacency used by Percolation
_STRUCTURE = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=bool)


def spanning_cluster_mask(open_mask: np.ndarray) -> np.ndarray:
    """Return the open sites belonging to a cluster that touches top and bottom."""

    open_mask = np.asarray(open_mask, dtype=bool)
    if open_mask.ndim != 2:
        raise ValueError(f"expected a 2D mask, got shape {open_mask.shape}")
    labels, _ = ndimage.label(open_mask, structure=_STRUCTURE)
    top = set(np.unique(labels[0])) - {0}
    bottom = set(np.unique(labels[-1])) - {0}
    spanning = sorted(top & bottom)
    if not spanning:
        return np.zeros_like(open_mask)
    return np.isin(labels, spanning)


def site_image(open_mask: np.ndarray, highlight_spanning: bool = False) -> np.ndarray:
    image = np.where(open_mask, OPEN, CLOSED).astype(np.int8)
    if highlight_spanning:
        image[spanning_cluster_mask(open_mask)] = SPANNING
    return image


def draw_grid(
    percolation: Percolation,
    ax: Optional[plt.Axes] = None,
    highlight_spanning: bool = False,
    title: Optional[str] = None,
) -> plt.Axes:
    """Draw every site as a filled square: open in blue, closed in black.

    Row 0 is drawn at the top. The model is only read, never changed.
    """

    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    n = percolation.n
    image = site_image(percolation.open_mask(), highlight_spanning=highlight_spanning)
    ax.imshow(
        image,
        cmap=_CMAP,
        vmin=CLOSED,
        vmax=SPANNING,
        origin="upper",
        interpolation="nearest",
        extent=(0, n, n, 0),
    )
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    if title is not None:
        ax.set_title(title)
    return ax


def save_frame(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{name}.png"
    fig.savefig(p, dpi=FRAME_DPI, bbox_inches="tight")
    plt.close(fig)
    return p


def make_gif(frames: Sequence[Path], outpath: Path, fps: int = GIF_FPS) -> Path:
    if not frames:
        raise ValueError("no frames to write")
    imgs: List[np.ndarray] = [imageio.imread(f) for f in frames]
    # frames saved with bbox_inches="tight" can differ by a pixel
    height = min(img.shape[0] for img in imgs)
    width = min(img.shape[1] for img in imgs)
    imageio.mimsave(outpath, [img[:height, :width] for img in imgs], duration=1000 / fps)
    return outpath


__all__ = [
    "draw_grid",
    "make_gif",
    "save_frame",
    "site_image",
    "spanning_cluster_mask",
]
