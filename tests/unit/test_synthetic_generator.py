"""Tests for the imbalanced synthetic data generator."""

from __future__ import annotations

import numpy as np

from unskew.config import SyntheticDataConfig
from unskew.io.synthetic_generator import SyntheticGenerator


class TestSyntheticGenerator:
    def test_columns_and_size(self) -> None:
        df = SyntheticGenerator(SyntheticDataConfig(n_features=3)).generate(50)
        assert list(df.columns) == ["x0", "x1", "x2", "y"]
        assert len(df) == 50
        assert set(df["y"].unique()) <= {0, 1}

    def test_minority_rate(self) -> None:
        cfg = SyntheticDataConfig(minority_rate=0.1, random_seed=3)
        df = SyntheticGenerator(cfg).generate(5000)
        assert abs(df["y"].mean() - 0.1) < 0.02

    def test_reproducible(self) -> None:
        cfg = SyntheticDataConfig(random_seed=11)
        a = SyntheticGenerator(cfg).generate(100)
        b = SyntheticGenerator(cfg).generate(100)
        np.testing.assert_array_equal(a.values, b.values)

    def test_generate_train_returns_dataset(self) -> None:
        cfg = SyntheticDataConfig(n_samples=120, n_holdout=80)
        gen = SyntheticGenerator(cfg)
        train = gen.generate_train()
        holdout = gen.generate_holdout()
        assert len(train) == 120
        assert len(holdout) == 80
        assert train.feature_names == ["x0", "x1"]
        assert train.class_values == (0, 1)
