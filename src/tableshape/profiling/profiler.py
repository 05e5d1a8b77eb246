"""Main profiling orchestrator."""

import time
from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from tableshape.analysis.correlation import (
    compute_association_matrix,
    detect_keys_and_dependencies,
)
from tableshape.analysis.missingness import analyze_missingness
from tableshape.analysis.scanning import cell, collect_columns, scan_columns
from tableshape.analysis.statistics import (
    build_column_stats,
    compute_categorical_entropy,
    detect_outliers,
)
from tableshape.core.config import Settings, get_settings
from tableshape.core.exceptions import ProfileInputError
from tableshape.core.logging import (
    end_profile_metrics,
    get_logger,
    record_operation_timing,
    start_profile_metrics,
)
from tableshape.core.models.base import Result
from tableshape.profiling.models import ProfileOptions, ProfileSummary

logger = get_logger(__name__)

type Records = Iterable[Mapping[str, Any]]


def _materialize(records: Records) -> list[Mapping[str, Any]]:
    """Check the input contract and return the records as a list."""
    if isinstance(records, str | bytes | Mapping):
        raise ProfileInputError(
            f"records must be a sequence of mappings, got {type(records).__name__}"
        )
    try:
        rows = list(records)
    except TypeError as e:
        raise ProfileInputError(f"records must be iterable, got {type(records).__name__}") from e

    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise ProfileInputError(f"expected a mapping, got {type(row).__name__}", row_index=i)
        for key in row:
            if not isinstance(key, str):
                raise ProfileInputError(
                    f"column names must be strings, got {type(key).__name__}", row_index=i
                )
    return rows


def _resolve_options(options: ProfileOptions | Mapping[str, bool] | None) -> ProfileOptions:
    if options is None:
        return ProfileOptions()
    if isinstance(options, ProfileOptions):
        return options
    try:
        return ProfileOptions.model_validate(dict(options))
    except ValidationError as e:
        raise ProfileInputError(f"invalid profile options: {e}") from e


def _sample_rows(
    rows: list[Mapping[str, Any]], columns: list[str], size: int
) -> list[dict[str, Any]]:
    """Project the first rows onto every column.

    Absent and missing cells (None, NaN, infinities) are filled with None.
    """
    return [{column: cell(row, column) for column in columns} for row in rows[:size]]


def profile(
    records: Records,
    options: ProfileOptions | Mapping[str, bool] | None = None,
    settings: Settings | None = None,
) -> ProfileSummary:
    """Profile a collection of records.

    This is the main entry point for profiling. It:
    1. Collects the sorted column set and a sample of leading rows
    2. Scans every column for presence and value kinds
    3. Computes numeric or categorical statistics for single-kind columns
    4. Runs each optional component that is enabled in ``options``

    An empty collection returns at once with no columns and no optional
    components, whatever ``options`` asks for. The records are only read,
    never modified.

    Args:
        records: Iterable of mappings from column name to value
        options: Optional components to compute (ProfileOptions or a mapping of flags)
        settings: Sizes, caps and thresholds (defaults to get_settings())

    Returns:
        ProfileSummary

    Raises:
        ProfileInputError: If records is not an iterable of string-keyed mappings
    """
    rows = _materialize(records)
    opts = _resolve_options(options)
    settings = settings or get_settings()

    # Nothing to profile: no columns, and optional components are left out
    if not rows:
        logger.debug("profile_empty", options=opts.model_dump())
        return ProfileSummary(row_count=0)

    metrics = start_profile_metrics(str(uuid4()))
    logger.debug("profile_started", rows=len(rows), options=opts.model_dump())

    try:
        start_time = time.time()
        columns = collect_columns(rows)
        scans = scan_columns(rows, columns)
        column_stats = {
            column: build_column_stats(scans[column], top_k=settings.top_k_values)
            for column in columns
        }
        record_operation_timing("column_stats", time.time() - start_time)

        summary = ProfileSummary(
            row_count=len(rows),
            columns=columns,
            column_stats=column_stats,
            sample_rows=_sample_rows(rows, columns, settings.sample_row_count),
        )

        if opts.association_matrix:
            start_time = time.time()
            summary.association_matrix = compute_association_matrix(
                rows, columns, column_stats, max_columns=settings.association_max_columns
            )
            record_operation_timing("association_matrix", time.time() - start_time)

        if opts.keys_dependencies:
            start_time = time.time()
            summary.keys_and_dependencies = detect_keys_and_dependencies(
                rows, columns, max_columns=settings.keys_max_columns
            )
            record_operation_timing("keys_dependencies", time.time() - start_time)

        if opts.missingness_patterns:
            start_time = time.time()
            summary.missingness_patterns = analyze_missingness(
                rows,
                columns,
                max_columns=settings.co_missing_max_columns,
                top_n=settings.co_missing_top_n,
            )
            record_operation_timing("missingness_patterns", time.time() - start_time)

        if opts.outliers:
            start_time = time.time()
            summary.outliers = detect_outliers(
                column_stats,
                scans,
                tukey_multiplier=settings.tukey_multiplier,
                zscore_threshold=settings.zscore_threshold,
            )
            record_operation_timing("outliers", time.time() - start_time)

        if opts.categorical_entropy:
            start_time = time.time()
            summary.categorical_entropy = compute_categorical_entropy(rows, column_stats)
            record_operation_timing("categorical_entropy", time.time() - start_time)

        metrics.rows_processed = len(rows)
        metrics.columns_processed = len(columns)
    finally:
        end_profile_metrics()

    logger.debug("profile_completed", **metrics.to_dict())
    return summary


def profile_table(
    records: Records,
    options: ProfileOptions | Mapping[str, bool] | None = None,
    settings: Settings | None = None,
) -> Result[ProfileSummary]:
    """Profile a collection of records, reporting bad input as a failed Result.

    Args:
        records: Iterable of mappings from column name to value
        options: Optional components to compute
        settings: Sizes, caps and thresholds

    Returns:
        Result containing ProfileSummary or the input error
    """
    try:
        return Result.ok(profile(records, options=options, settings=settings))
    except ProfileInputError as e:
        logger.warning("profile_rejected", error=str(e))
        return Result.fail(f"Profiling failed: {e}")
