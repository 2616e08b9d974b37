"""Tests for tiling and decal validation."""

import random

from grid_helpers import make_grid, random_grids
from tilegen.generators.tiles import (
    BlockSide,
    EdgeDecal,
    TileRectangle,
    combine,
    generate_edge_decals,
)
from tilegen.validation import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationStage,
    validate_decals,
    validate_tiling,
)


def _codes(result):
    return sorted({issue.code for issue in result.issues})


class TestValidateTiling:
    def test_combiner_output_passes(self) -> None:
        for i, grid in enumerate(random_grids()):
            result = validate_tiling(grid, combine(grid, random.Random(i)))
            assert result.passed, result.report()
            assert result.stage == ValidationStage.COMBINE

    def test_illegal_size(self) -> None:
        grid = make_grid(["###"])
        result = validate_tiling(grid, [TileRectangle(0, 0, 3, 1)])
        assert _codes(result) == ["TILE-001"]

    def test_covers_empty_cell(self) -> None:
        grid = make_grid(["#."])
        result = validate_tiling(grid, [TileRectangle(0, 0, 2, 1)])
        assert _codes(result) == ["TILE-002"]

    def test_covers_out_of_bounds_cell(self) -> None:
        grid = make_grid(["#"])
        result = validate_tiling(grid, [TileRectangle(0, 0, 1, 2)])
        assert _codes(result) == ["TILE-002"]

    def test_overlap(self) -> None:
        grid = make_grid(["##"])
        result = validate_tiling(grid, [TileRectangle(0, 0, 2, 1), TileRectangle(1, 0)])
        assert _codes(result) == ["TILE-003"]

    def test_missing_cell(self) -> None:
        grid = make_grid(["##"])
        result = validate_tiling(grid, [TileRectangle(0, 0)])
        assert _codes(result) == ["TILE-004"]
        assert result.errors[0].location == "(1,0)"


class TestValidateDecals:
    def test_generator_output_passes(self) -> None:
        for grid in random_grids():
            result = validate_decals(grid, generate_edge_decals(grid))
            assert result.passed, result.report()

    def test_missing_decal(self) -> None:
        grid = make_grid(["#"])
        decals = generate_edge_decals(grid)[:-1]
        assert _codes(validate_decals(grid, decals)) == ["DECAL-001"]

    def test_unexpected_decal(self) -> None:
        grid = make_grid(["##"])
        decals = generate_edge_decals(grid)
        decals.append(EdgeDecal(BlockSide.RIGHT, 0, (64.0, 0.0), 0))
        assert _codes(validate_decals(grid, decals)) == ["DECAL-002"]

    def test_duplicate_decal(self) -> None:
        grid = make_grid(["#"])
        decals = generate_edge_decals(grid)
        decals.append(decals[0])
        assert _codes(validate_decals(grid, decals)) == ["DECAL-003"]

    def test_bad_variant(self) -> None:
        grid = make_grid(["#"])
        decals = [d for d in generate_edge_decals(grid) if d.side != BlockSide.TOP]
        decals.append(EdgeDecal(BlockSide.TOP, 3, (0.0, 0.0), 0))
        assert _codes(validate_decals(grid, decals)) == ["DECAL-004"]

    def test_accepts_generator_input(self) -> None:
        grid = make_grid(["##", "#."])
        decals = generate_edge_decals(grid)
        assert validate_decals(grid, (d for d in decals)).passed


class TestResult:
    def test_empty_result_passes(self) -> None:
        result = ValidationResult()
        assert result.passed
        assert result.report() == "Validation passed: No issues found"

    def test_warnings_do_not_fail(self) -> None:
        result = ValidationResult()
        result.add_issue(ValidationIssue(Severity.WARN, "TILE-900", "odd"))
        assert result.passed
        assert len(result.warnings) == 1

    def test_merge_and_report(self) -> None:
        a = ValidationResult(stage=ValidationStage.COMBINE)
        b = ValidationResult()
        b.fail("DECAL-001", "Missing LEFT decal", "(0,0)")
        assert a.merge(b) is a
        assert a.failed
        report = a.report()
        assert "FAILED (combine)" in report
        assert "[FAIL] DECAL-001 at=(0,0) :: Missing LEFT decal :: fix=N/A" in report

    def test_code_counts(self) -> None:
        grid = make_grid(["##", "##"])
        result = validate_tiling(grid, [TileRectangle(0, 0)])
        assert result.code_counts() == {"TILE-004": 3}
