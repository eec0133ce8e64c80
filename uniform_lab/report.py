"""Demonstration run: reference draws and uniformity tests for both generators."""

import logging

import matplotlib.pyplot as plt
from tabulate import tabulate

from .config import RunConfig
from .generators import LinearCongruentialGenerator, TableShuffleCombiner
from .uniformity import (
    chi_square_uniform_test,
    collect_sample,
    ks_uniform_test,
    moment_test_sample,
    results_frame,
)

logger = logging.getLogger(__name__)

GENERATOR_NAMES = ("MultiplicativeCongruential", "MacLarenMarsaglia")


def reference_generators(cfg=RunConfig()):
    """Fresh (plain LCG, shuffled LCG) pair built from the reference parameters."""
    lcg = LinearCongruentialGenerator(cfg.seed1, cfg.constant1)
    combiner = TableShuffleCombiner(
        LinearCongruentialGenerator(cfg.seed1, cfg.constant1),
        LinearCongruentialGenerator(cfg.seed2, cfg.constant2),
        cfg.table_size,
    )
    return lcg, combiner


def checkpoint_draws(generator, checkpoints):
    """Values of the requested 1-based draw numbers, e.g. {1: ..., 15: ..., 1000: ...}."""
    wanted = sorted(set(checkpoints))
    if wanted and wanted[0] < 1:
        raise ValueError(f"draw numbers start at 1, got {wanted[0]}")
    values = {}
    count = 0
    for target in wanted:
        while count < target:
            value = generator.draw()
            count += 1
        values[target] = value
    return values


def run_report(cfg=RunConfig()):
    """Checkpoint draws plus moment, K-S and chi-square tests for each generator."""
    checkpoints = {}
    for name, gen in zip(GENERATOR_NAMES, reference_generators(cfg)):
        checkpoints[name] = checkpoint_draws(gen, cfg.checkpoints)

    # new instances so the tested samples start from the seeds
    samples = {}
    moment_results = []
    hypothesis_results = []
    for name, gen in zip(GENERATOR_NAMES, reference_generators(cfg)):
        sample = collect_sample(gen, cfg.sample_size)
        samples[name] = sample
        moment_results.append(moment_test_sample(sample, cfg.tolerance, name=name))
        hypothesis_results.append(("K-S", ks_uniform_test(sample, cfg.alpha, name=name)))
        hypothesis_results.append(
            ("Chi-square", chi_square_uniform_test(sample, cfg.bins, cfg.alpha, name=name))
        )
        logger.info("Tested %s on %d draws", name, cfg.sample_size)

    return {
        "config": cfg,
        "checkpoints": checkpoints,
        "samples": samples,
        "moments": moment_results,
        "hypothesis": hypothesis_results,
        "passed": all(r.passed for r in moment_results),
    }


def _ordinal(n):
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_report(report):
    cfg = report["config"]
    lines = []

    rows = []
    for name, values in report["checkpoints"].items():
        for number, value in values.items():
            rows.append([name, _ordinal(number), repr(value)])
    lines.append("=" * 70)
    lines.append("REFERENCE DRAWS")
    lines.append("=" * 70)
    lines.append(tabulate(rows, headers=["Generator", "Draw", "Value"]))

    lines.append("")
    lines.append("=" * 70)
    lines.append(f"MOMENT TEST (N = {cfg.sample_size}, tolerance = {cfg.tolerance})")
    lines.append("=" * 70)
    df = results_frame(report["moments"])
    lines.append(tabulate(df, headers="keys", tablefmt="github", showindex=False, floatfmt=".6f"))

    lines.append("")
    lines.append("=" * 70)
    lines.append(f"HYPOTHESIS TESTS (alpha = {cfg.alpha})")
    lines.append("=" * 70)
    rows = [
        [test, r.name, r.statistic, r.pvalue, "PASS" if r.passed else "FAIL"]
        for test, r in report["hypothesis"]
    ]
    lines.append(tabulate(rows, headers=["Test", "Generator", "Statistic", "p-value", "Status"], floatfmt=".6f"))
    return "\n".join(lines)


def report_payload(report):
    """JSON-serialisable view of a report (samples left out)."""
    return {
        "checkpoints": {
            name: {str(k): v for k, v in values.items()}
            for name, values in report["checkpoints"].items()
        },
        "moments": [
            {
                "generator": r.name,
                "size": r.size,
                "observed": r.observed._asdict(),
                "deviations": r.deviations._asdict(),
                "tolerance": r.tolerance,
                "passed": r.passed,
            }
            for r in report["moments"]
        ],
        "hypothesis": [
            {
                "test": test,
                "generator": r.name,
                "statistic": r.statistic,
                "pvalue": r.pvalue,
                "passed": r.passed,
            }
            for test, r in report["hypothesis"]
        ],
        "passed": report["passed"],
    }


# ======== HISTOGRAMAS ========
def save_histograms(samples, path, bins=20):
    """One histogram per sample, side by side, written to ``path``."""
    fig, axes = plt.subplots(1, len(samples), figsize=(5 * len(samples), 4), squeeze=False)
    colors = ("skyblue", "salmon", "lightgreen")
    for i, (ax, (name, sample)) in enumerate(zip(axes[0], samples.items())):
        ax.hist(sample, bins=bins, range=(0.0, 1.0), color=colors[i % len(colors)], edgecolor="black")
        ax.axhline(len(sample) / bins, color="black", linestyle="--", linewidth=1)
        ax.set_title(f"Histogram - {name}")
        ax.set_xlabel("Value")
        ax.set_ylabel("Frequency")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
