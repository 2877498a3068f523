"""
Tests for the matrix rules - validation, generation and addition.
"""

import pytest
from pydantic import ValidationError

from src.domain.matrix_rules import (
    REASON_COLUMNS_RANGE,
    REASON_MISSING,
    REASON_ROWS_RANGE,
    DimensionMismatchError,
    add,
    generate,
    validate_dimensions,
)
from src.models.dc_models import GenerationFormulaModel, MatrixKindModel, MatrixModel


class TestValidateDimensions:
    def test_every_in_range_pair_is_valid(self):
        for rows in range(1, 11):
            for columns in range(1, 11):
                result = validate_dimensions(rows, columns)
                assert result.valid is True
                assert result.reason is None

    @pytest.mark.parametrize(
        "rows, columns, reason",
        [
            (None, 3, REASON_MISSING),
            (3, None, REASON_MISSING),
            ("", "", REASON_MISSING),
            ("abc", 3, REASON_MISSING),
            (2.5, 3, REASON_MISSING),
            (True, 3, REASON_MISSING),
            (0, 3, REASON_ROWS_RANGE),
            (11, 3, REASON_ROWS_RANGE),
            (-1, 3, REASON_ROWS_RANGE),
            (3, 0, REASON_COLUMNS_RANGE),
            (3, 11, REASON_COLUMNS_RANGE),
        ],
    )
    def test_invalid_input(self, rows, columns, reason):
        result = validate_dimensions(rows, columns)
        assert result.valid is False
        assert result.reason == reason

    def test_first_failing_check_wins(self):
        assert validate_dimensions(None, 99).reason == REASON_MISSING
        assert validate_dimensions(0, 0).reason == REASON_ROWS_RANGE

    def test_numeric_strings_and_integral_floats_are_accepted(self):
        assert validate_dimensions("4", " 7 ").valid is True
        assert validate_dimensions(4.0, 10.0).valid is True

    def test_decimal_strings_follow_the_float_rule(self):
        assert validate_dimensions("3.0", " 4.0 ").valid is True
        assert validate_dimensions("2.5", 3).reason == REASON_MISSING
        assert validate_dimensions("0.0", 3).reason == REASON_ROWS_RANGE
        assert validate_dimensions("nan", 3).reason == REASON_MISSING


class TestGenerate:
    def test_sum_formula(self):
        for rows in range(1, 11):
            for columns in range(1, 11):
                matrix = generate(rows, columns, GenerationFormulaModel.sum)
                assert matrix.rows == rows
                assert matrix.columns == columns
                for i in range(rows):
                    for j in range(columns):
                        assert matrix.data[i][j] == i + j

    def test_product_formula(self):
        for rows in range(1, 11):
            for columns in range(1, 11):
                matrix = generate(rows, columns, "product")
                assert matrix.rows == rows
                assert matrix.columns == columns
                for i in range(rows):
                    for j in range(columns):
                        assert matrix.data[i][j] == i * j

    def test_kind_and_name(self):
        sum_matrix = generate(2, 3, GenerationFormulaModel.sum)
        product_matrix = generate(2, 3, GenerationFormulaModel.product)
        assert sum_matrix.kind == MatrixKindModel.sum_generated
        assert product_matrix.kind == MatrixKindModel.product_generated
        assert sum_matrix.name == "Sum Matrix (i + j)"
        assert product_matrix.name == "Product Matrix (i × j)"

    def test_deterministic_data_with_fresh_ids(self):
        first = generate(4, 5, GenerationFormulaModel.sum)
        second = generate(4, 5, GenerationFormulaModel.sum)
        assert first.data == second.data
        assert first.id != second.id

    def test_cells_are_plain_ints(self):
        matrix = generate(2, 2, GenerationFormulaModel.product)
        assert all(type(cell) is int for row in matrix.data for cell in row)


class TestAdd:
    def test_three_by_three_scenario(self):
        sum_matrix = generate(3, 3, GenerationFormulaModel.sum)
        product_matrix = generate(3, 3, GenerationFormulaModel.product)
        assert sum_matrix.data == ((0, 1, 2), (1, 2, 3), (2, 3, 4))
        assert product_matrix.data == ((0, 0, 0), (0, 1, 2), (0, 2, 4))

        result = add(sum_matrix, product_matrix)
        assert result.data == ((0, 1, 2), (1, 3, 5), (2, 5, 8))
        assert result.kind == MatrixKindModel.addition_result
        assert (result.rows, result.columns) == (3, 3)

    def test_one_by_one_scenario(self):
        sum_matrix = generate(1, 1, GenerationFormulaModel.sum)
        product_matrix = generate(1, 1, GenerationFormulaModel.product)
        assert sum_matrix.data == ((0,),)
        assert product_matrix.data == ((0,),)
        assert add(sum_matrix, product_matrix).data == ((0,),)

    def test_commutative(self):
        a = generate(4, 6, GenerationFormulaModel.sum)
        b = generate(4, 6, GenerationFormulaModel.product)
        assert add(a, b).data == add(b, a).data

    def test_inputs_are_not_modified(self):
        a = generate(2, 2, GenerationFormulaModel.sum)
        b = generate(2, 2, GenerationFormulaModel.product)
        a_data, b_data = a.data, b.data
        add(a, b)
        assert a.data == a_data
        assert b.data == b_data

    def test_dimension_mismatch(self):
        a = generate(3, 3, GenerationFormulaModel.sum)
        b = generate(2, 2, GenerationFormulaModel.product)
        with pytest.raises(DimensionMismatchError) as excinfo:
            add(a, b)
        assert excinfo.value.a_shape == (3, 3)
        assert excinfo.value.b_shape == (2, 2)

    def test_dimension_mismatch_is_a_value_error(self):
        a = generate(1, 2, GenerationFormulaModel.sum)
        b = generate(2, 1, GenerationFormulaModel.sum)
        with pytest.raises(ValueError):
            add(a, b)

    def test_large_cells_do_not_wrap(self):
        a = MatrixModel(
            name="a",
            data=[[2**62, -(2**62)]],
            rows=1,
            columns=2,
            kind=MatrixKindModel.sum_generated,
        )
        b = MatrixModel(
            name="b",
            data=[[2**62, -(2**62)]],
            rows=1,
            columns=2,
            kind=MatrixKindModel.product_generated,
        )
        assert add(a, b).data == ((2**63, -(2**63)),)


class TestMatrixModel:
    def test_shape_must_match_data(self):
        with pytest.raises(ValidationError):
            MatrixModel(
                name="bad",
                data=[[1, 2], [3]],
                rows=2,
                columns=2,
                kind=MatrixKindModel.sum_generated,
            )

    def test_row_count_must_match_data(self):
        with pytest.raises(ValidationError):
            MatrixModel(
                name="bad",
                data=[[1, 2]],
                rows=2,
                columns=2,
                kind=MatrixKindModel.sum_generated,
            )

    def test_matrix_is_immutable(self):
        matrix = generate(2, 2, GenerationFormulaModel.sum)
        with pytest.raises(ValidationError):
            matrix.rows = 5

    @pytest.mark.parametrize("rows, columns", [(0, 0), (0, 1), (1, 0), (11, 11)])
    def test_shape_must_be_within_dimension_bounds(self, rows, columns):
        with pytest.raises(ValidationError):
            MatrixModel(
                name="bad",
                data=[[0] * columns for _ in range(rows)],
                rows=rows,
                columns=columns,
                kind=MatrixKindModel.sum_generated,
            )
