from __future__ import annotations
import os
from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

from .frontier import Frontier
from .hypervolume import EmissionRecord


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def plot_selection(frontier: Frontier, records: Sequence[EmissionRecord], outpath: str, title: str = "Greedy hypervolume selection"):
    """
    Frontier segments as lines, emitted points numbered in emission order.
    """
    ensure_dir(os.path.dirname(outpath))
    coords = frontier.as_array()
    pts = np.array([r.point for r in records], dtype=float).reshape(-1, 2)

    plt.figure()
    for sx, sy, ex, ey in coords:
        plt.plot([sx, ex], [sy, ey], color="0.4", linewidth=1)
    if len(pts) > 0:
        plt.scatter(pts[:, 0], pts[:, 1], s=18, zorder=3)
        for r in records[:20]:
            plt.annotate(str(r.index), r.point, textcoords="offset points", xytext=(3, 3), fontsize=7)
    plt.scatter([frontier.reference.x], [frontier.reference.y], marker="x", color="k", label="reference")
    plt.xlabel("Objective 1 (higher better)")
    plt.ylabel("Objective 2 (higher better)")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(outpath, dpi=160)
    plt.close()


def plot_anytime_curve(records: Sequence[EmissionRecord], outpath: str):
    """Relative hypervolume against number of emitted points."""
    ensure_dir(os.path.dirname(outpath))
    k = [r.index for r in records]
    rel = [r.hv_relative for r in records]

    plt.figure()
    plt.step(k, rel, where="post", marker="o", markersize=3)
    plt.ylim(0, 1.05)
    plt.xlabel("Points emitted")
    plt.ylabel("Relative hypervolume")
    plt.title("Anytime behavior: hypervolume vs points")
    plt.tight_layout()
    plt.savefig(outpath, dpi=160)
    plt.close()
