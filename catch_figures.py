# === Catch figures: Pareto charts, length histograms, faceted distributions ===
from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from scipy.stats import gaussian_kde

from catch_analysis import COHORTS, COHORT_COL, cohort_distribution

COHORT_TITLES = {
    "hpfmonitoring": "Histogram - Best 2 Fishers, Monitored Fish",
    "generalmonitoring": "Histogram - General Fishers, Monitored Fish",
    "competition": "Histogram - Competition Fish",
}
COHORT_COLORS = {"hpfmonitoring": "red", "generalmonitoring": "green", "competition": "blue"}
DENSITY_FILL = "#6666FF"


def plot_pareto(pareto: pd.DataFrame, title: str, savepath: Path) -> Path:
    """
    Bars: fish per fisher (ranked). Line + points: cumulative fish caught.
    Right axis reads the cumulative line as % of all fish.
    """
    x = pareto["rownum"].to_numpy()
    counts = pareto["no_fish_caught"].to_numpy()
    cum = pareto["cumtotal"].to_numpy()

    fig, ax = plt.subplots(figsize=(12, 6))
    cmap = plt.get_cmap("viridis")
    if len(counts):
        norm = plt.Normalize(vmin=counts.min(), vmax=counts.max())
        ax.bar(x, counts, color=cmap(norm(counts)), edgecolor="white", linewidth=0.5, label="Fish caught")
        ax.plot(x, cum, color="black", lw=1.5, label="Cumulative total")
        ax.scatter(x, cum, c=counts, cmap=cmap, norm=norm, zorder=3, edgecolors="k", linewidths=0.3)

        ax2 = ax.twinx()
        ymax = ax.get_ylim()[1]
        ax2.set_ylim(0, ymax / cum[-1] * 100)
        ax2.set_ylabel("Cumulative % of fish", fontsize=12, fontweight="bold")
        ax.legend(loc="center right")

    ax.set_xlabel("Fisher rank", fontsize=12, fontweight="bold")
    ax.set_ylabel("No. Fish Caught", fontsize=12, fontweight="bold")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.grid(axis="y", alpha=0.25)
    fig.tight_layout()
    fig.savefig(savepath, dpi=200)
    plt.close(fig)
    return Path(savepath)


def plot_cohort_histograms(combined: pd.DataFrame, savepath: Path, value_col="length") -> Path:
    fig, axes = plt.subplots(1, len(COHORTS), figsize=(15, 5))
    for ax, label in zip(axes, COHORTS):
        vals = combined.loc[combined[COHORT_COL] == label, value_col].dropna().to_numpy(dtype="float64")
        ax.hist(vals, color=COHORT_COLORS[label], edgecolor="black")
        ax.set_xlabel("Length (cm)")
        ax.set_title(COHORT_TITLES[label], fontsize=11)
    fig.tight_layout()
    fig.savefig(savepath, dpi=200)
    plt.close(fig)
    return Path(savepath)


def plot_faceted_distribution(combined: pd.DataFrame, column: str, bins, xlabel: str, savepath: Path) -> Path:
    """
    One row per cohort: density histogram over `bins` plus a Gaussian KDE.
    The KDE is skipped for a cohort with fewer than two distinct in-range values.
    """
    bins = np.asarray(bins, dtype="float64")
    dist = cohort_distribution(combined, column, bins)
    xs = np.linspace(bins[0], bins[-1], 256)

    fig, axes = plt.subplots(len(COHORTS), 1, figsize=(9, 2.6 * len(COHORTS)), sharex=True)
    for ax, label in zip(axes, COHORTS):
        d = dist[dist[COHORT_COL] == label]
        ax.bar(d["bin_left"].to_numpy(), d["density"].fillna(0.0).to_numpy(),
               width=(d["bin_right"] - d["bin_left"]).to_numpy(),
               align="edge", color="white", edgecolor="black")

        vals = pd.to_numeric(combined.loc[combined[COHORT_COL] == label, column], errors="coerce")
        vals = vals.dropna().to_numpy(dtype="float64")
        vals = vals[(vals >= bins[0]) & (vals <= bins[-1])]
        if np.unique(vals).size >= 2:
            ys = gaussian_kde(vals)(xs)
            ax.fill_between(xs, ys, color=DENSITY_FILL, alpha=0.2)
            ax.plot(xs, ys, color="black", lw=0.8)

        ax.set_ylabel("density")
        ax.text(1.01, 0.5, label, rotation=270, va="center", transform=ax.transAxes)
        ax.grid(alpha=0.2)

    axes[-1].set_xlabel(xlabel, fontsize=12, fontweight="bold")
    fig.tight_layout()
    fig.savefig(savepath, dpi=200)
    plt.close(fig)
    return Path(savepath)
