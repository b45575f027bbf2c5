# run_pipeline.py
# Part 1 of "when is the best time to go fishing": barramundi catches from one impoundment.
# load -> Pareto per dataset -> split top fishers -> combine cohorts -> describe/plot -> save.

from pathlib import Path

import pandas as pd

from data_extract import DATA_DIR, load_datasets
from catch_analysis import (
    HOUR_BINS,
    HPF_FISHERS,
    LENGTH_BINS,
    build_combined,
    cohort_distribution,
    cohort_length_summary,
    cohort_mean_length,
    dataset_summary,
    fisher_pareto,
    save_combined,
)
from catch_figures import plot_cohort_histograms, plot_faceted_distribution, plot_pareto

# =================== CONFIG ======================
OUT = Path("output")                                      # csv tables
COMBINED_PATH = Path("dataframes") / "combineddataset.parquet"
# =================================================


def run(data_dir: Path = DATA_DIR, out_dir: Path = OUT, combined_path: Path = COMBINED_PATH,
        hpf_ids=HPF_FISHERS) -> dict:
    out_dir = Path(out_dir)
    figs = out_dir / "figs"
    figs.mkdir(parents=True, exist_ok=True)

    print("Loading catch datasets…")
    monitoring, competition = load_datasets(data_dir)

    with pd.option_context("display.width", 140, "display.max_columns", 20):
        print("\n--- monitoring (head) ---")
        print(monitoring.head())

    for name, df in [("monitoring", monitoring), ("competition", competition)]:
        dataset_summary(df).to_csv(out_dir / f"{name}_summary.csv")
        print(f"✓ {name}_summary.csv")

    # ---- Pareto per dataset ----
    paretos = {}
    for name, df, title in [
        ("monitoring", monitoring, "Monitoring fishers: fish per fisher"),
        ("competition", competition, "Competition fishers: fish per fisher"),
    ]:
        p = fisher_pareto(df)
        p.to_csv(out_dir / f"{name}_fisher_pareto.csv", index=False)
        plot_pareto(p, title, figs / f"{name}_fisher_pareto.png")
        paretos[name] = p
        top = p.head(2)
        if not top.empty:
            print(f"✓ {name}_fisher_pareto.csv ({len(p):,} fishers; top 2 = "
                  f"{top['cumperc'].iloc[-1]:.1f}% of fish)")
        else:
            print(f"✓ {name}_fisher_pareto.csv (no rows)")

    # ---- Cohorts ----
    combined = build_combined(monitoring, competition, hpf_ids)
    print(f"  combined rows: {len(combined):,}")

    means = cohort_mean_length(combined)
    means.to_csv(out_dir / "cohort_mean_length.csv")
    for label, m in means.items():
        print(f"  mean length [{label}]: {m:.1f}")

    length_summary = cohort_length_summary(combined)
    length_summary.to_csv(out_dir / "cohort_length_summary.csv")
    print("✓ cohort_length_summary.csv")

    length_dist = cohort_distribution(combined, "length", LENGTH_BINS)
    hour_dist = cohort_distribution(combined, "hour_catch", HOUR_BINS)
    length_dist.to_csv(out_dir / "cohort_length_distribution.csv", index=False)
    hour_dist.to_csv(out_dir / "cohort_hour_distribution.csv", index=False)
    print("✓ cohort_length_distribution.csv, cohort_hour_distribution.csv")

    plot_cohort_histograms(combined, figs / "length_histograms_by_cohort.png")
    plot_faceted_distribution(combined, "length", LENGTH_BINS, "Length (cm)",
                              figs / "length_density_by_cohort.png")
    plot_faceted_distribution(combined, "hour_catch", HOUR_BINS, "Hour of catch",
                              figs / "hour_density_by_cohort.png")
    print("Saved figures in:", figs)

    save_combined(combined, combined_path)
    print(f"✓ combined dataset → {combined_path}")

    return {
        "monitoring_pareto": paretos["monitoring"],
        "competition_pareto": paretos["competition"],
        "combined": combined,
        "mean_length": means,
        "length_summary": length_summary,
        "length_distribution": length_dist,
        "hour_distribution": hour_dist,
    }


if __name__ == "__main__":
    run()
    print(f"\nAll outputs written to: {OUT.resolve()}")
