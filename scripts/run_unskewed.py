#!/usr/bin/env python
"""
Train and evaluate the unskewed sampling meta-learner over several seeds.

For each seed, fits:
- Baseline: the base learner on the original (skewed) training data
- Unskewed: the same learner wrapped in UnskewedSamplingClassifier

and evaluates both on a held-out test split.

Usage:
    python scripts/run_unskewed.py
    python scripts/run_unskewed.py --data data/train.csv --label-col y
    python scripts/run_unskewed.py --minority-ratio 1.0 --majority-ratio 0.25 --n-seeds 5

Results saved to experiments/unskewed_{timestamp}/.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from sklearn.model_selection import train_test_split
from tqdm import tqdm

from unskew.config import (
    ExperimentConfig,
    SyntheticDataConfig,
    UnskewedSamplingConfig,
)
from unskew.data import Dataset, load_csv_dataset
from unskew.evaluation.metrics import compute_metrics
from unskew.io.synthetic_generator import SyntheticGenerator
from unskew.meta import UnskewedSamplingClassifier
from unskew.models import Randomizable, build_base_learner


def split_dataset(
    dataset: Dataset,
    test_fraction: float,
    random_seed: int,
) -> tuple[Dataset, Dataset]:
    """Stratified train/test split on labeled rows."""
    labeled = dataset.drop_missing_labels()
    train_idx, test_idx = train_test_split(
        np.arange(len(labeled)),
        test_size=test_fraction,
        random_state=random_seed,
        stratify=labeled.y,
    )
    return labeled.take(train_idx), labeled.take(test_idx)


def run_single_seed(
    seed: int,
    train: Dataset,
    test: Dataset,
    sampling_cfg: UnskewedSamplingConfig,
    metrics: List[str],
) -> Dict[str, Any]:
    """Fit baseline and unskewed models for one seed and evaluate both."""
    y_test = test.label_indices()

    baseline = build_base_learner(sampling_cfg.base_learner, sampling_cfg.learner_params)
    if isinstance(baseline, Randomizable):
        baseline.set_random_seed(seed)
    baseline.fit(train.X, train.label_indices())
    baseline_scores = np.asarray(baseline.predict_proba(test.X))

    seeded_cfg = UnskewedSamplingConfig(**{**sampling_cfg.model_dump(), "seed": seed})
    unskewed = UnskewedSamplingClassifier(cfg=seeded_cfg).fit(train)
    unskewed_scores = unskewed.predict_proba(test.X)[:, 1]

    result = unskewed.resample_
    return {
        "seed": seed,
        "n_train": len(train),
        "n_resampled": len(result),
        "minority_target": result.minority_target,
        "majority_target": result.majority_target,
        "learner_seed": result.learner_seed,
        "baseline": compute_metrics(y_test, baseline_scores, metrics),
        "unskewed": compute_metrics(y_test, unskewed_scores, metrics),
        "measures": {
            name: unskewed.get_measure(name) for name in unskewed.enumerate_measures()
        },
    }


def summarize(trials: List[Dict[str, Any]], metrics: List[str]) -> Dict[str, Any]:
    """Mean and std of each metric across seeds, per method."""
    summary: Dict[str, Any] = {}
    for method in ("baseline", "unskewed"):
        summary[method] = {}
        for metric in metrics:
            values = np.array([t[method][metric] for t in trials])
            summary[method][metric] = {
                "mean": float(values.mean()),
                "std": float(values.std()),
            }
    return summary


def main():
    parser = argparse.ArgumentParser(description="Run unskewed sampling experiment")
    parser.add_argument("--data", type=str, default="", help="Labeled CSV file (default: synthetic data)")
    parser.add_argument("--label-col", type=str, default="y", help="Label column in the CSV")
    parser.add_argument("--config", type=str, default=None, help="Sampling config YAML")
    parser.add_argument("--minority-ratio", type=float, default=None)
    parser.add_argument("--majority-ratio", type=float, default=None)
    parser.add_argument("--minority-chance", type=float, default=None)
    parser.add_argument(
        "--base-learner", type=str, default=None,
        choices=["xgboost", "logistic_regression"],
    )
    parser.add_argument("--n-seeds", type=int, default=None)
    parser.add_argument("--start-seed", type=int, default=None)
    parser.add_argument("--name", type=str, default="", help="Suffix for the output directory")
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    # Load configs from YAML
    sampling_cfg = UnskewedSamplingConfig.from_yaml(args.config)
    exp_cfg = ExperimentConfig.from_yaml()

    # CLI overrides (or use config defaults)
    overrides = {
        "minority_ratio": args.minority_ratio,
        "majority_ratio": args.majority_ratio,
        "minority_chance": args.minority_chance,
        "base_learner": args.base_learner,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    sampling_cfg = UnskewedSamplingConfig(**{**sampling_cfg.model_dump(), **overrides})
    n_seeds = args.n_seeds if args.n_seeds is not None else exp_cfg.n_seeds
    start_seed = args.start_seed if args.start_seed is not None else exp_cfg.start_seed

    if args.data:
        dataset = load_csv_dataset(args.data, label_col=args.label_col)
        source = args.data
    else:
        data_cfg = SyntheticDataConfig.from_yaml()
        dataset = SyntheticGenerator(data_cfg).generate_train()
        source = f"synthetic(minority_rate={data_cfg.minority_rate})"

    train, test = split_dataset(dataset, exp_cfg.test_fraction, start_seed)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    exp_name = f"unskewed_{timestamp}"
    if args.name:
        exp_name += f"_{args.name}"
    exp_dir = PROJECT_ROOT / "experiments" / exp_name
    exp_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 70)
    print("Unskewed Sampling Experiment")
    print("=" * 70)
    print(f"  Output: {exp_dir}")
    print(f"  Data: {source}")
    print(f"  Train class counts: {train.class_counts()}")
    print(f"  Test class counts: {test.class_counts()}")
    print(f"  minority_ratio: {sampling_cfg.minority_ratio}")
    print(f"  majority_ratio: {sampling_cfg.majority_ratio}")
    print(f"  base_learner: {sampling_cfg.base_learner}")
    print(f"  Seeds: {start_seed} to {start_seed + n_seeds - 1}")

    trials = []
    for seed in tqdm(range(start_seed, start_seed + n_seeds), desc="Seeds"):
        trials.append(run_single_seed(seed, train, test, sampling_cfg, exp_cfg.metrics))

    summary = summarize(trials, exp_cfg.metrics)

    with open(exp_dir / "config.json", "w") as f:
        json.dump(
            {
                "sampling": sampling_cfg.model_dump(),
                "experiment": exp_cfg.model_dump(),
                "data": source,
                "n_seeds": n_seeds,
                "start_seed": start_seed,
            },
            f,
            indent=2,
        )
    with open(exp_dir / "trials.json", "w") as f:
        json.dump(trials, f, indent=2)
    with open(exp_dir / "summary.json", "w") as f:
        json.dump(summary, f, indent=2)

    print("\nResults (mean ± std over seeds):")
    for metric in exp_cfg.metrics:
        b = summary["baseline"][metric]
        u = summary["unskewed"][metric]
        print(
            f"  {metric:>18}: baseline {b['mean']:.4f} ± {b['std']:.4f}  |  "
            f"unskewed {u['mean']:.4f} ± {u['std']:.4f}"
        )


if __name__ == "__main__":
    main()
