import random

import pytest

from duotrigordle.utils.mersenne_twister import MersenneTwister


def _stdlib_twin(rng):
    """A stdlib Random positioned at the same point in the MT19937 stream."""
    saved = rng.save()
    twin = random.Random()
    twin.setstate((3, tuple(saved[1:]) + (saved[0],), None))
    return twin


def test_reference_outputs():
    # Published MT19937 values for the default seed 5489
    rng = MersenneTwister(5489)
    assert rng.u32() == 3499211612
    for _ in range(9998):
        rng.u32()
    assert rng.u32() == 4123659995


def test_same_seed_same_sequence():
    for seed in (0, 1, 42, 2 ** 32 - 1):
        a = MersenneTwister(seed)
        b = MersenneTwister(seed)
        assert [a.u32() for _ in range(10000)] == [b.u32() for _ in range(10000)]


def test_different_seeds_differ():
    a = MersenneTwister(1)
    b = MersenneTwister(2)
    assert [a.u32() for _ in range(10)] != [b.u32() for _ in range(10)]


def test_seed_truncated_to_32_bits():
    a = MersenneTwister(2 ** 32 + 7)
    b = MersenneTwister(7)
    assert a.u32() == b.u32()
    assert MersenneTwister(-1).mt[0] == 0xffffffff


def test_matches_stdlib_generator():
    rng = MersenneTwister(123)
    twin = _stdlib_twin(rng)
    for _ in range(2000):
        assert rng.u32() == twin.getrandbits(32)


def test_f64_ix_matches_stdlib_random():
    rng = MersenneTwister(20220124)
    rng.u32()
    twin = _stdlib_twin(rng)
    for _ in range(1000):
        assert rng.f64_ix() == twin.random()


def test_outputs_in_range():
    rng = MersenneTwister(99)
    for _ in range(1000):
        assert 0 <= rng.u32() < 2 ** 32
        assert 0.0 <= rng.f32_ii() <= 1.0
        assert 0.0 <= rng.f32_ix() < 1.0
        assert 0.0 < rng.f32_xx() < 1.0
        assert 0 <= rng.u53() < 2 ** 53


def test_save_and_restore_continues_sequence():
    for draws in (0, 1, 623, 624, 625, 1500):
        rng = MersenneTwister(2024)
        for _ in range(draws):
            rng.u32()
        saved = rng.save()
        assert len(saved) == 625

        restored = MersenneTwister(saved)
        assert [restored.u32() for _ in range(1000)] == [rng.u32() for _ in range(1000)]


def test_fresh_generator_cursor_forces_twist():
    saved = MersenneTwister(5).save()
    assert saved[0] == 624


def test_restore_rejects_bad_state():
    saved = MersenneTwister(5).save()
    with pytest.raises(ValueError):
        MersenneTwister(saved[:-1])
    with pytest.raises(ValueError):
        MersenneTwister([625] + saved[1:])
