"""Tests for the portable seed codec."""

from __future__ import annotations

import json
import logging

import pytest

from pcgext.core import extended
from pcgext.core.base import BaseSeed
from pcgext.core.extended import ExtendedSeed
from pcgext.io.serialize import (
    compute_seed_hash,
    dump_seed,
    from_portable,
    load_seed,
    to_portable,
)
from pcgext.utils.exceptions import DecodeError


class TestPortable:
    def test_layout(self, seed: ExtendedSeed) -> None:
        data = to_portable(seed)
        assert data == [
            [seed.base.state, seed.base.increment],
            [0x9E3779B9, 0x7F4A7C15, 0x12345678],
        ]

    def test_round_trip(self, seed: ExtendedSeed) -> None:
        for _ in range(20):
            assert from_portable(to_portable(seed)) == seed
            seed = extended.next_seed(seed)

    def test_round_trip_empty_extension(self) -> None:
        seed = extended.initial_seed(99)
        decoded = from_portable(to_portable(seed))
        assert decoded == seed
        assert decoded.extension == ()

    def test_round_trip_extreme_words(self) -> None:
        seed = ExtendedSeed(BaseSeed(0xFFFFFFFF, 0xFFFFFFFF), (0, 0xFFFFFFFF))
        assert from_portable(to_portable(seed)) == seed

    def test_tuples_accepted(self) -> None:
        seed = from_portable(((1, 3), (4, 5)))
        assert seed == ExtendedSeed(BaseSeed(1, 3), (4, 5))

    def test_signed_words_normalized(self) -> None:
        seed = from_portable([[-1, -3], [-2, 7]])
        assert seed.base == BaseSeed(0xFFFFFFFF, 0xFFFFFFFD)
        assert seed.extension == (0xFFFFFFFE, 7)

    def test_decoded_seed_continues_stream(self, seed: ExtendedSeed) -> None:
        decoded = from_portable(json.loads(json.dumps(to_portable(seed))))
        assert extended.peel(extended.next_seed(decoded)) == extended.peel(
            extended.next_seed(seed)
        )


class TestDecodeErrors:
    @pytest.mark.parametrize(
        "data",
        [
            [[1, 3]],
            [[1, 3], [], []],
            [[1], []],
            [[1, 3, 5], []],
            [[1, "3"], []],
            [[1, 3], [1.5]],
            [[1, 3], [True]],
            [[1, 3], None],
            [[1, 3], [[4]]],
            [1, [2]],
            "[[1,3],[]]",
            {"state": 1, "increment": 3},
            None,
        ],
    )
    def test_malformed_shape(self, data: object) -> None:
        with pytest.raises(DecodeError):
            from_portable(data)

    def test_word_out_of_range(self) -> None:
        with pytest.raises(DecodeError):
            from_portable([[2**32, 3], []])
        with pytest.raises(DecodeError):
            from_portable([[1, 3], [-(2**31) - 1]])

    def test_even_increment(self) -> None:
        with pytest.raises(DecodeError, match="odd"):
            from_portable([[1, 4], []])

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_portable([])

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pcgext.io.serialize"):
            with pytest.raises(DecodeError):
                from_portable([[1, 3]])
        assert "Rejected portable seed" in caplog.text


class TestJson:
    def test_dump_is_compact(self) -> None:
        seed = ExtendedSeed(BaseSeed(1, 3), (4, 5))
        assert dump_seed(seed) == "[[1,3],[4,5]]"

    def test_round_trip(self, seed: ExtendedSeed) -> None:
        assert load_seed(dump_seed(seed)) == seed

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError, match="JSON"):
            load_seed("[[1, 3], [")

    def test_hash_deterministic(self, seed: ExtendedSeed) -> None:
        h1 = compute_seed_hash(seed)
        h2 = compute_seed_hash(from_portable(to_portable(seed)))
        assert h1 == h2
        assert len(h1) == 64  # SHA-256 hex digest

    def test_hash_changes_with_seed(self, seed: ExtendedSeed) -> None:
        assert compute_seed_hash(seed) != compute_seed_hash(extended.next_seed(seed))
