"""Tests for dataset containers and CSV loading."""

from __future__ import annotations

import json

import numpy as np
import pandas as pd
import pytest

from unskew.data import CSVBackend, Dataset, infer_class_values, load_csv_dataset
from unskew.exceptions import InvalidLabelDomain


class TestDataset:
    """Tests for the Dataset container."""

    def test_shape_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="Shape mismatch"):
            Dataset(X=np.zeros((3, 2)), y=np.zeros(4), feature_names=["a", "b"])

    def test_feature_name_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="columns"):
            Dataset(X=np.zeros((3, 2)), y=np.zeros(3), feature_names=["a"])

    def test_class_values_must_be_two_distinct(self) -> None:
        with pytest.raises(ValueError, match="two distinct"):
            Dataset(X=np.zeros((2, 1)), y=np.zeros(2), feature_names=["a"], class_values=(0, 0))
        with pytest.raises(ValueError, match="two distinct"):
            Dataset(X=np.zeros((2, 1)), y=np.zeros(2), feature_names=["a"], class_values=(0, 1, 2))

    def test_drop_missing_labels(self, dataset_factory) -> None:
        ds = dataset_factory([0, None, 1, None, 0])
        labeled = ds.drop_missing_labels()
        assert len(labeled) == 3
        np.testing.assert_array_equal(labeled.X[:, 0], [0, 2, 4])
        # Input untouched
        assert len(ds) == 5

    def test_take_allows_repeats(self, dataset_factory) -> None:
        ds = dataset_factory([0, 1, 0])
        taken = ds.take([1, 1, 2])
        np.testing.assert_array_equal(taken.X[:, 0], [1, 1, 2])
        np.testing.assert_array_equal(taken.y, [1, 1, 0])

    def test_label_indices_follow_class_values(self, dataset_factory) -> None:
        ds = dataset_factory(["no", "yes", "no"], class_values=("no", "yes"))
        np.testing.assert_array_equal(ds.label_indices(), [0, 1, 0])

    def test_class_counts(self, imbalanced_dataset) -> None:
        assert imbalanced_dataset.class_counts() == {0: 80, 1: 20}

    def test_frame_round_trip(self, imbalanced_dataset) -> None:
        df = imbalanced_dataset.to_frame()
        assert list(df.columns) == ["x0", "x1", "y"]
        back = Dataset.from_frame(df)
        np.testing.assert_array_equal(back.X, imbalanced_dataset.X)
        np.testing.assert_array_equal(back.y, imbalanced_dataset.y)

    def test_from_frame_requires_label_column(self) -> None:
        with pytest.raises(ValueError, match="'label'"):
            Dataset.from_frame(pd.DataFrame({"a": [1.0]}), label_col="label")


class TestInferClassValues:
    """Tests for label domain inference."""

    def test_zero_one(self) -> None:
        assert infer_class_values(pd.Series([1, 0, 1])) == (0, 1)
        assert infer_class_values(pd.Series([0, 0])) == (0, 1)

    def test_sorted_strings(self) -> None:
        assert infer_class_values(pd.Series(["yes", "no", None, "yes"])) == ("no", "yes")

    def test_more_than_two_values_raises(self) -> None:
        with pytest.raises(InvalidLabelDomain):
            infer_class_values(pd.Series(["a", "b", "c"]))


class TestCSVBackend:
    """Tests for loading a labeled CSV file."""

    def test_load(self, tmp_path) -> None:
        path = tmp_path / "train.csv"
        pd.DataFrame({"f1": [0.5, 1.5, 2.5], "f2": [1, 2, 3], "y": [0, 1, 0]}).to_csv(path, index=False)

        ds = load_csv_dataset(path)
        assert ds.feature_names == ["f1", "f2"]
        assert ds.X.dtype == np.float64
        assert ds.class_values == (0, 1)
        np.testing.assert_array_equal(ds.y, [0, 1, 0])

    def test_missing_labels_are_kept(self, tmp_path) -> None:
        path = tmp_path / "train.csv"
        path.write_text("f1,label\n1.0,pos\n2.0,\n3.0,neg\n")

        backend = CSVBackend(path, label_col="label")
        ds = backend.load()
        assert backend.class_values == ("neg", "pos")
        assert len(ds) == 3
        assert len(ds.drop_missing_labels()) == 2
        summary = backend.get_summary()
        assert summary["n_missing_labels"] == 1
        assert summary["class_counts"] == {"neg": 1, "pos": 1}

    def test_metadata(self, tmp_path) -> None:
        path = tmp_path / "train.csv"
        path.write_text("f1,y\n1.0,0\n2.0,1\n")
        (tmp_path / "meta.json").write_text(json.dumps({"source": "unit-test"}))
        assert CSVBackend(path).metadata == {"source": "unit-test"}

    def test_missing_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            CSVBackend(tmp_path / "absent.csv")

    def test_missing_label_column_raises(self, tmp_path) -> None:
        path = tmp_path / "train.csv"
        path.write_text("f1,f2\n1.0,2.0\n")
        with pytest.raises(ValueError, match="'y'"):
            CSVBackend(path)
