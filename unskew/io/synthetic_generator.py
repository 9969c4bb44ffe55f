"""
Synthetic imbalanced data generator.

Gaussian mixture with C components and two classes:
- label y=1 (minority) is drawn with probability minority_rate
- μ_maj,c = μ_maj,1 + (c-1)·offset, μ_min,c = μ_min,1 + (c-1)·offset
- covariances Σ = A @ A.T + εI with A entries from U(0, σ_max)
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from unskew.config import SyntheticDataConfig
from unskew.data.dataset import Dataset


class SyntheticGenerator:
    """
    Generates imbalanced binary data using Gaussian Mixture Models.

    Each row belongs to one of C mixture components and is either majority
    (y=0) or minority (y=1). Label is assigned first via
    Bernoulli(minority_rate), then features are sampled from class-specific
    Gaussian distributions.
    """

    def __init__(self, cfg: SyntheticDataConfig):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.random_seed)

        # Pre-generate GMM parameters at init for consistency across samples
        self._mu_majority, self._mu_minority = self._generate_means()
        self._sigma_majority, self._sigma_minority = self._generate_covariances()

    def _generate_means(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Generate component-specific means for both classes.

        Returns:
            (mu_majority, mu_minority): Arrays of shape (n_components, n_features)
        """
        n_comp = self.cfg.n_components
        n_feat = self.cfg.n_features
        offset = self.cfg.gaussian_mixture.component_offset

        mu_maj_base = self._adjust_array_length(
            np.array(self.cfg.gaussian_mixture.mu_majority_base), n_feat
        )
        mu_min_base = self._adjust_array_length(
            np.array(self.cfg.gaussian_mixture.mu_minority_base), n_feat
        )

        component_shift = np.arange(n_comp)[:, None] * offset
        return mu_maj_base + component_shift, mu_min_base + component_shift

    def _adjust_array_length(self, arr: np.ndarray, target_len: int) -> np.ndarray:
        """Pad with zeros or truncate array to target length."""
        if len(arr) < target_len:
            return np.pad(arr, (0, target_len - len(arr)))
        return arr[:target_len]

    def _generate_covariances(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Generate component-specific covariance matrices.

        Returns:
            (sigma_majority, sigma_minority): Arrays of shape
            (n_components, n_features, n_features)
        """
        n_comp = self.cfg.n_components
        n_feat = self.cfg.n_features
        sigma_max = self.cfg.gaussian_mixture.sigma_max
        eps = 1e-6

        sigma_majority = np.zeros((n_comp, n_feat, n_feat))
        sigma_minority = np.zeros((n_comp, n_feat, n_feat))

        for c in range(n_comp):
            A_maj = self.rng.uniform(0, sigma_max, size=(n_feat, n_feat))
            A_min = self.rng.uniform(0, sigma_max, size=(n_feat, n_feat))

            sigma_majority[c] = A_maj @ A_maj.T + eps * np.eye(n_feat)
            sigma_minority[c] = A_min @ A_min.T + eps * np.eye(n_feat)

        return sigma_majority, sigma_minority

    def generate(self, n_samples: int) -> pd.DataFrame:
        """
        Sample rows from the mixture.

        Args:
            n_samples: Number of rows to generate.

        Returns:
            DataFrame with feature columns (x0, x1, ...) and 'y' label.
        """
        n_feat = self.cfg.n_features
        n_comp = self.cfg.n_components

        components = self.rng.integers(0, n_comp, size=n_samples)
        labels = self.rng.binomial(1, self.cfg.minority_rate, size=n_samples)

        features = np.zeros((n_samples, n_feat))

        for c in range(n_comp):
            for label, mu, sigma in (
                (0, self._mu_majority, self._sigma_majority),
                (1, self._mu_minority, self._sigma_minority),
            ):
                mask = (components == c) & (labels == label)
                n = int(mask.sum())
                if n > 0:
                    features[mask] = self.rng.multivariate_normal(mu[c], sigma[c], size=n)

        feature_cols = [f"x{i}" for i in range(n_feat)]
        df = pd.DataFrame(features, columns=feature_cols)
        df["y"] = labels

        return df

    def generate_train(self) -> Dataset:
        """Generate a training Dataset of n_samples rows."""
        return Dataset.from_frame(self.generate(self.cfg.n_samples))

    def generate_holdout(self) -> Dataset:
        """Generate a holdout Dataset of n_holdout rows."""
        return Dataset.from_frame(self.generate(self.cfg.n_holdout))
