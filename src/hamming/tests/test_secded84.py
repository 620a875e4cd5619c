"""Tests for the extended Hamming(8,4) SECDED codec.
"""

import itertools

import pytest

from hamming.codec.hamming74 import encode
from hamming.codec.secded84 import (
    EXTENDED_PARITY_CHECK_MATRIX,
    classify_extended,
    correct_extended,
    decode_extended,
    encode_extended,
    extended_bit_type,
    extract_data_extended,
    syndrome_extended,
)
from hamming.core.matrix import flip
from hamming.core.types import BitType, ErrorReport, ErrorType


class TestMatrix:
    """Test the extended parity check matrix."""

    def test_shape(self):
        """Test H' is 4x8."""
        assert EXTENDED_PARITY_CHECK_MATRIX.shape == (4, 8)

    def test_overall_parity_row(self):
        """Test the last row checks every bit."""
        assert EXTENDED_PARITY_CHECK_MATRIX[3].tolist() == [1] * 8

    def test_p0_column_excluded_from_positional_checks(self):
        """Test column 0 is zero in the s1, s2, s4 rows."""
        assert EXTENDED_PARITY_CHECK_MATRIX[:3, 0].tolist() == [0, 0, 0]


class TestEncodeExtended:
    """Test Hamming(8,4) encoding."""

    def test_encode_1111(self):
        """Test all ones: 7-bit word has odd weight so p0 = 1."""
        assert encode_extended([1, 1, 1, 1]) == [1] * 8

    def test_encode_1011(self):
        """Test p0 = 0 when the 7-bit word has even weight."""
        assert encode_extended([1, 0, 1, 1]) == [0, 0, 1, 1, 0, 0, 1, 1]

    def test_prefixes_standard_codeword(self, all_nibbles):
        """Test bits 1-7 equal the Hamming(7,4) codeword."""
        for data in all_nibbles:
            assert encode_extended(data)[1:] == encode(data)

    def test_even_overall_parity(self, all_nibbles):
        """Test every extended codeword has even weight."""
        for data in all_nibbles:
            assert sum(encode_extended(data)) % 2 == 0

    def test_minimum_distance_four(self, all_nibbles):
        """Test any two codewords differ in at least 4 bits."""
        codewords = [encode_extended(d) for d in all_nibbles]
        for a, b in itertools.combinations(codewords, 2):
            assert sum(x != y for x, y in zip(a, b)) >= 4

    def test_wrong_size(self):
        """Test that wrong size raises error."""
        with pytest.raises(ValueError, match="must be exactly 4 bits"):
            encode_extended([1, 1, 1])


class TestSyndromeExtended:
    """Test extended syndrome calculation."""

    def test_zero_syndrome_all_codewords(self, all_nibbles):
        """Test every clean codeword has a zero syndrome."""
        for data in all_nibbles:
            assert syndrome_extended(encode_extended(data)) == [0, 0, 0, 0]

    def test_single_flip_syndrome(self):
        """Test a flip at index i gives the binary form of i and p0 = 1."""
        codeword = encode_extended([0, 1, 1, 0])
        for index in range(8):
            s = syndrome_extended(flip(codeword, index))
            assert s == [index & 1, (index >> 1) & 1, (index >> 2) & 1, 1]

    def test_wrong_size(self):
        """Test that wrong size raises error."""
        with pytest.raises(ValueError, match="must be exactly 8 bits, got 7"):
            syndrome_extended([0] * 7)


class TestClassifyExtended:
    """Test the SECDED decision table."""

    def test_no_error(self):
        """Test p0=0, value=0."""
        assert classify_extended([0, 0, 0, 0]) == ErrorReport(ErrorType.NONE, 0, True)

    def test_p0_error(self):
        """Test p0=1, value=0 points at the overall parity bit."""
        assert classify_extended([0, 0, 0, 1]) == ErrorReport(ErrorType.SINGLE, 0, True)

    def test_single_error(self):
        """Test p0=1, value!=0 points at index value."""
        for value in range(1, 8):
            s = [value & 1, (value >> 1) & 1, (value >> 2) & 1, 1]
            assert classify_extended(s) == ErrorReport(ErrorType.SINGLE, value, True)

    def test_double_error(self):
        """Test p0=0, value!=0 is a detected, uncorrectable double error."""
        for value in range(1, 8):
            s = [value & 1, (value >> 1) & 1, (value >> 2) & 1, 0]
            assert classify_extended(s) == ErrorReport(ErrorType.DOUBLE, 0, False)

    def test_wrong_size(self):
        """Test that wrong size raises error."""
        with pytest.raises(ValueError, match="must be exactly 4 bits"):
            classify_extended([0, 0, 0])


class TestSingleErrorCorrection:
    """Test correction of every single flip."""

    def test_exhaustive_single_errors(self, all_nibbles):
        """Test every single flip of every codeword is corrected."""
        for data in all_nibbles:
            codeword = encode_extended(data)
            for index in range(8):
                received = flip(codeword, index)
                report = classify_extended(syndrome_extended(received))
                assert report.error_type is ErrorType.SINGLE
                assert report.error_position == index, f"Failed for {data} bit {index}"
                corrected = correct_extended(received, report.error_position)
                assert corrected == codeword
                assert extract_data_extended(corrected) == data

    def test_negative_position_is_noop(self):
        """Test a negative position returns an equal but new list."""
        received = [1, 0, 1, 1, 0, 1, 0, 1]
        corrected = correct_extended(received, -1)
        assert corrected == received
        assert corrected is not received

    def test_position_zero_flips_p0(self):
        """Test position 0 is the overall parity bit, not "no error"."""
        assert correct_extended([0] * 8, 0) == [1, 0, 0, 0, 0, 0, 0, 0]


class TestDoubleErrorDetection:
    """Test detection of every double error.

    Two flips at indices a != b give the positional syndrome a XOR b and
    leave the overall parity unchanged. Since a XOR b is never zero, no
    pair of positions cancels out: every double error is reported as
    "double", none slips through as "none" or "single".
    """

    def test_worked_example(self):
        """Test [1,1,1,1] with flips at 2 and 5 is reported as double."""
        codeword = encode_extended([1, 1, 1, 1])
        assert codeword == [1] * 8
        received = flip(flip(codeword, 2), 5)
        report = classify_extended(syndrome_extended(received))
        assert report.error_type is ErrorType.DOUBLE
        assert report.can_correct is False

    def test_all_pairs_detected(self, all_nibbles):
        """Test all C(8,2) = 28 position pairs over every nibble."""
        for data in all_nibbles:
            codeword = encode_extended(data)
            detected = set()
            for a, b in itertools.combinations(range(8), 2):
                report = classify_extended(syndrome_extended(flip(flip(codeword, a), b)))
                assert report == ErrorReport(ErrorType.DOUBLE, 0, False), f"{data} flips {a},{b}"
                detected.add((a, b))
            assert len(detected) == 28


class TestExtractDataExtended:
    """Test extended data extraction."""

    def test_roundtrip_all_nibbles(self, all_nibbles):
        """Test extract(encode(d)) == d for all 16 nibbles."""
        for data in all_nibbles:
            assert extract_data_extended(encode_extended(data)) == data

    def test_projection(self):
        """Test extraction only reads indices 3, 5, 6, 7."""
        assert extract_data_extended([1, 1, 1, 0, 1, 1, 0, 1]) == [0, 1, 0, 1]

    def test_wrong_size(self):
        """Test that wrong size raises error."""
        with pytest.raises(ValueError, match="must be exactly 8 bits"):
            extract_data_extended([0] * 7)


class TestDecodeExtended:
    """Test the combined extended decode pass."""

    def test_clean(self):
        """Test clean codeword decodes unchanged."""
        codeword = encode_extended([0, 1, 0, 0])
        result = decode_extended(codeword)
        assert result.report.error_type is ErrorType.NONE
        assert result.corrected == codeword
        assert result.data == [0, 1, 0, 0]

    def test_p0_error_corrected(self):
        """Test an error in the overall parity bit is repaired."""
        codeword = encode_extended([1, 0, 1, 1])
        result = decode_extended(flip(codeword, 0))
        assert result.report == ErrorReport(ErrorType.SINGLE, 0, True)
        assert result.corrected == codeword

    def test_double_error_left_uncorrected(self):
        """Test a double error leaves the received word as is."""
        received = flip(flip(encode_extended([1, 1, 1, 1]), 2), 5)
        result = decode_extended(received)
        assert result.report.error_type is ErrorType.DOUBLE
        assert result.corrected == received


class TestExtendedBitType:
    """Test extended bit role lookup."""

    def test_roles(self):
        """Test p0 at 0, parity at 1, 2, 4 and data elsewhere."""
        assert [extended_bit_type(i) for i in range(8)] == [
            BitType.OVERALL_PARITY,
            BitType.PARITY,
            BitType.PARITY,
            BitType.DATA,
            BitType.PARITY,
            BitType.DATA,
            BitType.DATA,
            BitType.DATA,
        ]

    def test_out_of_range(self):
        """Test positions outside 0-7 are rejected."""
        with pytest.raises(ValueError):
            extended_bit_type(8)
