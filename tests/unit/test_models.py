"""Tests for base learners and the capability checker."""

from __future__ import annotations

import numpy as np
import pytest

from unskew.config import XGBoostConfig
from unskew.data.dataset import Dataset
from unskew.exceptions import CapabilityViolation
from unskew.models import (
    Capabilities,
    CapabilityChecker,
    LogisticRegressionConfig,
    LogisticRegressionModel,
    MeasureProducer,
    Randomizable,
    XGBoostModel,
    build_base_learner,
)


class TestCapabilityChecker:
    """Tests for dataset precondition checks."""

    def test_valid_dataset_passes(self, imbalanced_dataset) -> None:
        CapabilityChecker(Capabilities()).check(imbalanced_dataset)

    def test_non_numeric_features_rejected(self) -> None:
        ds = Dataset(
            X=np.array([["a"], ["b"]], dtype=object),
            y=np.array([0, 1]),
            feature_names=["f"],
        )
        with pytest.raises(CapabilityViolation, match="numeric"):
            CapabilityChecker(Capabilities()).check(ds)

    def test_infinite_features_rejected(self) -> None:
        ds = Dataset(X=np.array([[1.0], [np.inf]]), y=np.array([0, 1]), feature_names=["f"])
        with pytest.raises(CapabilityViolation, match="infinite"):
            CapabilityChecker(Capabilities(missing_features=True)).check(ds)

    def test_missing_features_depend_on_capability(self) -> None:
        ds = Dataset(X=np.array([[1.0], [np.nan]]), y=np.array([0, 1]), feature_names=["f"])
        with pytest.raises(CapabilityViolation, match="missing"):
            CapabilityChecker(Capabilities(missing_features=False)).check(ds)
        CapabilityChecker(Capabilities(missing_features=True)).check(ds)

    def test_min_instances_counts_labeled_rows(self, dataset_factory) -> None:
        ds = dataset_factory([0, None, None, 1])
        CapabilityChecker(Capabilities(min_instances=2)).check(ds)
        with pytest.raises(CapabilityViolation, match="at least 3"):
            CapabilityChecker(Capabilities(min_instances=3)).check(ds)


class TestLogisticRegressionModel:
    """Tests for the logistic regression base learner."""

    def test_fit_predict(self, separable_dataset) -> None:
        model = LogisticRegressionModel()
        model.fit(separable_dataset.X, separable_dataset.y)
        proba = model.predict_proba(separable_dataset.X)
        assert proba.shape == (len(separable_dataset),)
        assert np.all((proba >= 0) & (proba <= 1))
        assert np.mean((proba >= 0.5) == separable_dataset.y) > 0.95

    def test_predict_before_fit_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not been fitted"):
            LogisticRegressionModel().predict_proba(np.zeros((1, 2)))

    @pytest.mark.parametrize("label", [0, 1])
    def test_single_class_gives_constant(self, label) -> None:
        model = LogisticRegressionModel()
        model.fit(np.arange(20.0).reshape(10, 2), np.full(10, label))
        np.testing.assert_array_equal(model.predict_proba(np.zeros((3, 2))), [label] * 3)
        assert model.get_measure("n_nonzero_coefs") == 0
        assert "constant" in str(model)

    def test_optional_capabilities(self) -> None:
        model = LogisticRegressionModel()
        assert isinstance(model, Randomizable)
        assert isinstance(model, MeasureProducer)
        assert model.capabilities().missing_features is False

    def test_set_random_seed(self) -> None:
        model = LogisticRegressionModel(LogisticRegressionConfig(C=0.3))
        model.set_random_seed(123)
        assert model.cfg.random_seed == 123
        assert model.cfg.C == 0.3

    def test_measures(self, separable_dataset) -> None:
        model = LogisticRegressionModel()
        model.fit(separable_dataset.X, separable_dataset.y)
        assert model.enumerate_measures() == ["n_nonzero_coefs"]
        assert 0 <= model.get_measure("n_nonzero_coefs") <= 2
        with pytest.raises(ValueError, match="Unknown measure"):
            model.get_measure("depth")


class TestXGBoostModel:
    """Tests for the XGBoost base learner."""

    def test_fit_predict(self, separable_dataset) -> None:
        model = XGBoostModel(XGBoostConfig(n_estimators=20))
        model.fit(separable_dataset.X, separable_dataset.y)
        proba = model.predict_proba(separable_dataset.X)
        assert proba.shape == (len(separable_dataset),)
        assert np.mean((proba >= 0.5) == separable_dataset.y) > 0.95
        assert model.get_measure("best_iteration") > 0

    @pytest.mark.parametrize("label", [0, 1])
    def test_single_class_gives_constant(self, label) -> None:
        model = XGBoostModel()
        model.fit(np.arange(80.0).reshape(40, 2), np.full(40, label))
        np.testing.assert_array_equal(model.predict_proba(np.zeros((3, 2))), [label] * 3)
        assert model.get_measure("n_trees") == 0
        assert "constant" in str(model)

    def test_refit_on_two_classes_replaces_constant(self, separable_dataset) -> None:
        model = XGBoostModel(XGBoostConfig(n_estimators=10))
        model.fit(np.zeros((5, 2)), np.ones(5))
        model.fit(separable_dataset.X, separable_dataset.y)
        assert model.get_measure("n_trees") > 0

    def test_predict_before_fit_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not been fitted"):
            XGBoostModel().predict_proba(np.zeros((1, 2)))

    def test_handles_missing_features(self) -> None:
        assert XGBoostModel().capabilities().missing_features is True

    def test_set_random_seed_keeps_other_params(self) -> None:
        model = XGBoostModel(XGBoostConfig(max_depth=5))
        model.set_random_seed(77)
        assert model.cfg.random_seed == 77
        assert model.cfg.max_depth == 5

    def test_measures(self, separable_dataset) -> None:
        model = XGBoostModel(XGBoostConfig(n_estimators=15, validation_fraction=0.0))
        model.fit(separable_dataset.X, separable_dataset.y)
        assert model.get_measure("n_trees") == 15
        assert model.get_measure("best_iteration") == 14


class TestBuildBaseLearner:
    def test_by_name(self) -> None:
        assert isinstance(build_base_learner("xgboost"), XGBoostModel)
        lr = build_base_learner("logistic_regression", {"C": 0.1})
        assert isinstance(lr, LogisticRegressionModel)
        assert lr.cfg.C == 0.1

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown base learner"):
            build_base_learner("svm")
