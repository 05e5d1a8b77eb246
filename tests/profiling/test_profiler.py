"""Tests for the profiling entry points."""

import copy
import json
import math
import random
import re
from datetime import date

import pytest

from tableshape import ProfileInputError, ProfileOptions, profile, profile_table
from tableshape.core.config import Settings


class TestProfile:
    """Tests for profile on the base summary."""

    def test_basic_profiling(self, people_records):
        """Test counts, kinds and stats on a small table."""
        summary = profile(people_records)

        assert summary.row_count == 3
        assert summary.columns == ["age", "gender", "id", "name"]
        assert len(summary.sample_rows) == 3
        assert summary.column_stats["age"].present == 3
        assert summary.column_stats["age"].types == ["number"]
        assert summary.column_stats["age"].numeric_stats.mean == 30
        assert summary.column_stats["name"].categorical_stats.unique == 3
        assert summary.column_stats["gender"].present == 2
        assert summary.column_stats["gender"].missing == 1
        assert summary.column_stats["gender"].types == ["boolean"]

    def test_empty_table(self):
        """Test an empty table has no columns or samples."""
        summary = profile([])

        assert summary.row_count == 0
        assert summary.columns == []
        assert summary.sample_rows == []
        assert summary.column_stats == {}

    def test_empty_table_skips_components(self):
        """Test an empty table returns no optional components even when requested."""
        summary = profile([], ProfileOptions.all())

        assert summary.row_count == 0
        assert summary.association_matrix is None
        assert summary.keys_and_dependencies is None
        assert summary.missingness_patterns is None
        assert summary.outliers is None
        assert summary.categorical_entropy is None
        assert summary.to_dict() == {
            "row_count": 0,
            "columns": [],
            "column_stats": {},
            "sample_rows": [],
        }

    def test_column_ordering(self):
        """Test columns are sorted, not in first-appearance order."""
        summary = profile([{"z": 1, "a": 2, "m": 3}, {"a": 4, "z": 5, "m": 6}])
        assert summary.columns == ["a", "m", "z"]

    def test_non_finite_numbers(self):
        """Test NaN and infinities are treated as missing."""
        records = [{"value": v} for v in (1, 2, 3, math.nan, math.inf, -math.inf)]
        summary = profile(records)

        stats = summary.column_stats["value"]
        assert stats.present == 3
        assert stats.missing == 3
        assert stats.numeric_stats.max_value == 3

    def test_integers_beyond_float_range(self):
        """Test oversized integers are treated as missing rather than raising."""
        records = [{"value": 10**400}, {"value": 1}, {"value": 3}]
        summary = profile(records, ProfileOptions.all())

        stats = summary.column_stats["value"]
        assert stats.present == 2
        assert stats.missing == 1
        assert stats.numeric_stats.mean == 2
        assert summary.sample_rows[0] == {"value": None}

    def test_mixed_types(self):
        """Test mixed columns report kinds and no statistics."""
        records = [{"mixed": 1}, {"mixed": "two"}, {"mixed": None}, {}, {"mixed": True}]
        summary = profile(records)

        stats = summary.column_stats["mixed"]
        assert stats.types == ["boolean", "number", "string"]
        assert stats.present == 3
        assert stats.missing == 2
        assert stats.numeric_stats is None
        assert stats.categorical_stats is None

    def test_object_values(self):
        """Test composite values are tagged as objects."""
        records = [
            {"obj": {"nested": "value"}},
            {"obj": [1, 2, 3]},
            {"obj": date(2024, 5, 1)},
            {"obj": re.compile("regex")},
        ]
        summary = profile(records)

        assert summary.column_stats["obj"].types == ["object"]
        assert summary.column_stats["obj"].numeric_stats is None
        assert summary.column_stats["obj"].categorical_stats is None

    def test_only_missing_values(self):
        """Test columns that are never present."""
        summary = profile([{"a": None, "b": None}, {"a": None}, {}])

        assert summary.columns == ["a", "b"]
        assert summary.column_stats["a"].present == 0
        assert summary.column_stats["a"].missing == 3
        assert summary.column_stats["b"].missing == 3
        assert summary.column_stats["a"].types == []

    def test_string_edge_cases(self):
        """Test whitespace and look-alike strings stay distinct."""
        values = ["", " ", "\n", "\t", "0", "false", "null", "undefined"]
        summary = profile([{"s": v} for v in values])

        stats = summary.column_stats["s"].categorical_stats
        assert stats.unique == 8
        assert len(stats.top10) == 8
        assert any(vc.value == "" for vc in stats.top10)


class TestSampleRows:
    """Tests for the sample rows in the summary."""

    def test_fewer_than_five(self):
        """Test all rows are sampled when there are fewer than five."""
        summary = profile([{"a": 1}, {"a": 2}])
        assert summary.sample_rows == [{"a": 1}, {"a": 2}]

    def test_projected_onto_all_columns(self):
        """Test absent cells are filled with None."""
        summary = profile([{"a": 1, "b": 2}, {"a": 3}, {"b": 4}])

        assert summary.sample_rows == [
            {"a": 1, "b": 2},
            {"a": 3, "b": None},
            {"a": None, "b": 4},
        ]

    def test_non_finite_cells_become_none(self):
        """Test NaN and infinities are sampled as None, like absent keys."""
        summary = profile([{"a": math.nan, "b": math.inf}, {"a": 1, "b": -math.inf}])

        assert summary.sample_rows == [{"a": None, "b": None}, {"a": 1, "b": None}]

    def test_first_five_only(self):
        """Test at most five leading rows are sampled."""
        summary = profile([{"i": i} for i in range(20)])
        assert [row["i"] for row in summary.sample_rows] == [0, 1, 2, 3, 4]

    def test_sample_size_setting(self):
        """Test the sample size follows settings."""
        settings = Settings(_env_file=None, sample_row_count=2)
        summary = profile([{"i": i} for i in range(20)], settings=settings)
        assert len(summary.sample_rows) == 2


class TestOptions:
    """Tests for enabling optional components."""

    def test_defaults_omit_components(self):
        """Test nothing optional is computed by default."""
        summary = profile([{"a": 1, "b": "x"}])

        assert summary.association_matrix is None
        assert summary.keys_and_dependencies is None
        assert summary.missingness_patterns is None
        assert summary.outliers is None
        assert summary.categorical_entropy is None

    def test_explicit_false(self):
        """Test flags set to False behave like absent flags."""
        options = {
            "association_matrix": False,
            "keys_dependencies": False,
            "missingness_patterns": False,
            "outliers": False,
            "categorical_entropy": False,
        }
        summary = profile([{"a": 1, "b": "x"}], options)

        assert "association_matrix" not in summary.to_dict()
        assert summary.outliers is None

    def test_mapping_options(self, mixed_pairs_records):
        """Test options given as a plain mapping."""
        summary = profile(mixed_pairs_records, {"association_matrix": True})

        assert summary.association_matrix["num1"]["num2"] == pytest.approx(1.0, abs=1e-5)
        assert summary.outliers is None

    def test_unknown_option_rejected(self):
        """Test misspelled options are an input error."""
        with pytest.raises(ProfileInputError):
            profile([{"a": 1}], {"associationMatrix": True})

    def test_all_components(self):
        """Test every component on a table that exercises each of them."""
        records = [
            {"id": i, "value": float(i % 7), "category": f"cat_{i % 3}", "flag": i % 2 == 0}
            for i in range(30)
        ]
        records.append({"id": 30, "value": 500.0})

        summary = profile(records, ProfileOptions.all())

        assert summary.association_matrix["value"]["category"] >= 0
        assert summary.keys_and_dependencies.candidate_primary_keys == [["id"]]
        assert summary.missingness_patterns.top_co_missing_pairs[0].pair == ("category", "flag")
        assert summary.outliers["value"].tukey_count == 1
        assert summary.outliers["value"].zscore_count == 1
        assert set(summary.categorical_entropy) == {"category", "flag"}

    def test_outliers_option(self):
        """Test one extreme value is flagged by both methods."""
        records = [{"value": i} for i in range(1, 11)] + [{"value": 101}]
        summary = profile(records, ProfileOptions(outliers=True))

        assert summary.outliers["value"].tukey_count == 1
        assert summary.outliers["value"].zscore_count == 1

    def test_functional_dependency_option(self):
        """Test a non-key determinant is reported."""
        records = [
            {"id": 1, "code": "A1", "dep": "X"},
            {"id": 2, "code": "A2", "dep": "Y"},
            {"id": 3, "code": "A1", "dep": "X"},
        ]
        summary = profile(records, ProfileOptions(keys_dependencies=True))

        kd = summary.keys_and_dependencies
        assert ["id"] in kd.candidate_primary_keys
        assert any(
            fd.determinant_columns == ["code"] and fd.dependent_column == "dep"
            for fd in kd.functional_dependencies
        )


class TestPerformanceCaps:
    """Tests for the column-count caps."""

    def test_sixty_columns(self):
        """Test association and keys are empty with 60 columns."""
        records = [{f"col{i}": i} for i in range(60)]
        summary = profile(
            records, ProfileOptions(association_matrix=True, keys_dependencies=True)
        )

        assert summary.association_matrix == {}
        assert summary.keys_and_dependencies.candidate_primary_keys == []
        assert summary.keys_and_dependencies.functional_dependencies == []

    def test_fifty_one_columns(self):
        """Test co-missing pairs are empty with 51 columns."""
        records = [{f"col{i}": i} for i in range(51)]
        summary = profile(records, ProfileOptions(missingness_patterns=True))

        assert summary.missingness_patterns.top_co_missing_pairs == []
        assert len(summary.missingness_patterns.per_column_rates) == 51

    def test_caps_from_settings(self):
        """Test caps follow settings."""
        settings = Settings(_env_file=None, association_max_columns=1)
        summary = profile(
            [{"a": 1, "b": 2}, {"a": 2, "b": 4}],
            ProfileOptions(association_matrix=True),
            settings=settings,
        )

        assert summary.association_matrix == {}

    def test_large_dataset(self):
        """Test a 10,000 row table with every component."""
        rng = random.Random(7)
        records = [
            {"id": i, "value": rng.random() * 1000, "category": f"cat_{i % 10}", "flag": i % 2 == 0}
            for i in range(10_000)
        ]

        summary = profile(records, ProfileOptions.all())

        assert summary.row_count == 10_000
        assert len(summary.sample_rows) == 5
        assert summary.column_stats["category"].categorical_stats.unique == 10


class TestContract:
    """Tests for input handling and purity."""

    def test_idempotent(self, people_records):
        """Test profiling twice yields the same summary."""
        first = profile(people_records, ProfileOptions.all())
        second = profile(people_records, ProfileOptions.all())

        assert first.to_dict() == second.to_dict()

    def test_input_not_mutated(self, people_records):
        """Test records are left untouched."""
        original = copy.deepcopy(people_records)
        profile(people_records, ProfileOptions.all())

        assert people_records == original

    def test_accepts_generators(self):
        """Test any iterable of mappings is accepted."""
        summary = profile({"n": i} for i in range(4))
        assert summary.row_count == 4

    @pytest.mark.parametrize("records", ["abc", b"abc", {"a": 1}, 42])
    def test_rejects_non_sequences(self, records):
        """Test strings, mappings and scalars are rejected."""
        with pytest.raises(ProfileInputError):
            profile(records)

    def test_rejects_non_mapping_rows(self):
        """Test rows must be mappings."""
        with pytest.raises(ProfileInputError, match="row 1"):
            profile([{"a": 1}, [1, 2]])

    def test_rejects_non_string_keys(self):
        """Test column names must be strings."""
        with pytest.raises(ProfileInputError):
            profile([{1: "a"}])

    def test_profile_table_wraps_errors(self):
        """Test profile_table returns a failed Result on bad input."""
        result = profile_table("not records")

        assert not result.success
        assert "records must be a sequence of mappings" in result.error

    def test_profile_table_success(self, people_records):
        """Test profile_table returns the summary."""
        result = profile_table(people_records)

        assert result.success
        assert result.unwrap().row_count == 3


class TestSerialization:
    """Tests for to_dict and to_json."""

    def test_to_dict_drops_unrequested(self, people_records):
        """Test only requested components appear."""
        data = profile(people_records, ProfileOptions(outliers=True)).to_dict()

        assert "outliers" in data
        assert "association_matrix" not in data
        assert "categorical_entropy" not in data
        assert data["sample_rows"][2]["gender"] is None

    def test_to_json(self):
        """Test JSON output handles object values."""
        records = [{"when": date(2024, 1, 2), "n": 1}, {"when": None, "n": 2}]
        payload = json.loads(profile(records).to_json())

        assert payload["row_count"] == 2
        assert payload["sample_rows"][0]["when"] == "2024-01-02"
        assert payload["column_stats"]["n"]["types"] == ["number"]
        assert payload["column_stats"]["n"]["numeric_stats"]["quartiles"] == [1.25, 1.5, 1.75]

    def test_to_json_is_strict_json(self):
        """Test non-finite cells never produce NaN or Infinity tokens."""

        def reject_constant(token):
            raise ValueError(f"non-standard JSON constant {token}")

        records = [{"v": math.nan, "w": 1}, {"v": math.inf, "w": 2}, {"v": -math.inf, "w": 3}]
        summary = profile(records, ProfileOptions.all())
        payload = json.loads(summary.to_json(), parse_constant=reject_constant)

        assert payload["sample_rows"][0] == {"v": None, "w": 1}
        assert payload["column_stats"]["v"]["missing"] == 3
