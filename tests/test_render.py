"""Tests for site_percolation.render."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pytest
from PIL import Image

from site_percolation.grid import Percolation
from site_percolation.render import (
    CLOSED,
    OPEN,
    SPANNING,
    draw_grid,
    make_gif,
    save_frame,
    site_image,
    spanning_cluster_mask,
)


class TestSpanningClusterMask:
    def test_empty_grid_has_no_spanning_cluster(self) -> None:
        assert not spanning_cluster_mask(np.zeros((4, 4), dtype=bool)).any()

    def test_column_spans(self) -> None:
        mask = np.zeros((3, 3), dtype=bool)
        mask[:, 1] = True
        mask[0, 2] = True  # attached to the column
        expected = mask.copy()
        assert np.array_equal(spanning_cluster_mask(mask), expected)

    def test_bottom_only_cluster_is_not_highlighted(self) -> None:
        mask = np.array(
            [
                [True, False, False],
                [True, False, False],
                [True, False, True],
            ]
        )
        span = spanning_cluster_mask(mask)
        assert span[:, 0].all()
        assert not span[2, 2]

    def test_diagonal_is_not_connected(self) -> None:
        mask = np.eye(3, dtype=bool)
        assert not spanning_cluster_mask(mask).any()

    def test_rejects_non_2d(self) -> None:
        with pytest.raises(ValueError):
            spanning_cluster_mask(np.zeros(4, dtype=bool))


class TestSiteImage:
    def test_values(self) -> None:
        mask = np.array([[True, False], [True, False]])
        image = site_image(mask)
        assert image.tolist() == [[OPEN, CLOSED], [OPEN, CLOSED]]
        highlighted = site_image(mask, highlight_spanning=True)
        assert highlighted.tolist() == [[SPANNING, CLOSED], [SPANNING, CLOSED]]


class TestDrawGrid:
    def test_draw_does_not_mutate_model(self) -> None:
        p = Percolation(4)
        p.open_site(0, 1)
        p.open_site(1, 1)
        before = p.open_mask()
        fig, ax = plt.subplots()
        returned = draw_grid(p, ax=ax, highlight_spanning=True, title="demo")
        assert returned is ax
        assert ax.get_title() == "demo"
        assert np.array_equal(p.open_mask(), before)
        assert len(ax.images) == 1
        plt.close(fig)

    def test_row_zero_is_drawn_at_top(self) -> None:
        p = Percolation(3)
        p.open_site(0, 0)
        ax = draw_grid(p)
        image = ax.images[0]
        left, right, bottom, top = image.get_extent()
        assert (left, right) == (0, 3)
        assert bottom > top
        assert image.get_array()[0, 0] == OPEN
        plt.close(ax.figure)

    def test_frames_and_gif(self, tmp_path) -> None:
        frames = []
        for k in range(2):
            p = Percolation(3)
            p.open_site(k, k)
            fig, ax = plt.subplots(figsize=(2, 2))
            draw_grid(p, ax=ax)
            frames.append(save_frame(fig, tmp_path, f"frame_{k}"))
        assert all(frame.exists() for frame in frames)
        gif = make_gif(frames, tmp_path / "out.gif")
        assert gif.exists()
        assert gif.stat().st_size > 0
        with Image.open(gif) as image:
            assert image.n_frames == 2
            assert image.info["duration"] == 500

    def test_gif_needs_frames(self, tmp_path) -> None:
        with pytest.raises(ValueError):
            make_gif([], tmp_path / "empty.gif")
