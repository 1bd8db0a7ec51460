"""
Tests for the 64-bit hash engine: mix() and hash01().
"""

from dotfield.hashing import MASK64, hash01, mix


class TestMix:

    def test_zero_is_fixed_point(self):
        assert mix(0, 0) == 0

    def test_matches_splitmix64_stream(self):
        """mix(0, k) is the k-th output of splitmix64 seeded with 0."""
        assert mix(0, 1) == 0xE220A8397B1DCDAF
        assert mix(0, 2) == 0x6E789E6AA1B965F4

    def test_deterministic(self):
        assert mix(123456789, 42) == mix(123456789, 42)

    def test_stays_in_64_bits(self):
        for seed in (0, 1, MASK64, 2**63):
            for i in (-(2**40), -1, 0, 1, 75, 2**40):
                assert 0 <= mix(seed, i) <= MASK64

    def test_negative_index_wraps_like_unsigned(self):
        assert mix(5, -1) == mix(5, MASK64)

    def test_distinct_indices_distinct_outputs(self):
        outputs = {mix(1, i) for i in range(2000)}
        assert len(outputs) == 2000

    def test_neighbouring_indices_differ_in_many_bits(self):
        a = mix(1, 1000)
        b = mix(1, 1001)
        changed = bin(a ^ b).count("1")
        assert 16 <= changed <= 48


class TestHash01:

    def test_range(self):
        for x in range(-20, 20):
            for y in range(-20, 20):
                v = hash01(x, y, 99)
                assert 0.0 <= v < 1.0

    def test_deterministic(self):
        assert hash01(3, -7, 11) == hash01(3, -7, 11)

    def test_depends_on_all_inputs(self):
        base = hash01(3, 4, 5)
        assert hash01(4, 4, 5) != base
        assert hash01(3, 5, 5) != base
        assert hash01(3, 4, 6) != base

    def test_axes_not_symmetric(self):
        assert hash01(1, 2, 0) != hash01(2, 1, 0)

    def test_roughly_uniform(self):
        values = [hash01(x, y, 2024) for x in range(64) for y in range(64)]
        mean = sum(values) / len(values)
        assert 0.45 < mean < 0.55
