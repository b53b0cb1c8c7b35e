import numpy as np
import pytest

from xorshift1024.bit_engine import MASK64, STATE_WORDS, Xorshift1024Star, validate_seed
from xorshift1024.errors import PreconditionError
from xorshift1024.seeded_random import SeededRandom

from conftest import CANONICAL_RAW, CANONICAL_SEED

# State after 20 draws from CANONICAL_SEED; the cursor sits at word 4.
STATE_AFTER_20 = (
    0x9590FC577C02CE28, 0x34BB1C68A0DE1FE3, 0x374B2F8D5ABAD583, 0x24DB54645A1D577A,
    0x3C42CB3D56F3CF31, 0xFE7F4947FB2166C9, 0xDFFE3A7BFB14CD58, 0x7A3C8FC13B0701FE,
    0x168A2924AF12D4CF, 0x1B3C57DA84AD08B1, 0x8B597948BB716BD7, 0x038ED02F4FD5954E,
    0x7ACF5D7F5DD6ECB9, 0x62880DB9F97BDB0C, 0xB9D5A41D7FF5C819, 0xD35C498B7830959E,
)


def test_first_draws_match_reference():
    engine = Xorshift1024Star(CANONICAL_SEED)
    assert tuple(engine.next_raw() for _ in range(5)) == CANONICAL_RAW


def test_state_after_twenty_draws():
    engine = Xorshift1024Star(CANONICAL_SEED)
    for _ in range(20):
        engine.next_raw()
    assert engine.state == STATE_AFTER_20
    assert engine.position == 4


def test_cursor_wraps_modulo_sixteen():
    engine = Xorshift1024Star(CANONICAL_SEED)
    positions = []
    for _ in range(STATE_WORDS + 1):
        engine.next_raw()
        positions.append(engine.position)
    assert positions == list(range(1, STATE_WORDS)) + [0, 1]


def test_outputs_are_uint64():
    engine = Xorshift1024Star(CANONICAL_SEED)
    for _ in range(1000):
        value = engine.next_raw()
        assert 0 <= value <= MASK64


def test_same_seed_same_stream():
    a = Xorshift1024Star(CANONICAL_SEED)
    b = Xorshift1024Star(CANONICAL_SEED)
    assert [a.next_raw() for _ in range(200)] == [b.next_raw() for _ in range(200)]


def test_reseed_rewinds_cursor():
    engine = Xorshift1024Star(CANONICAL_SEED)
    for _ in range(7):
        engine.next_raw()
    engine.seed(CANONICAL_SEED)
    assert engine.position == 0
    assert engine.next_raw() == CANONICAL_RAW[0]


def test_state_is_a_snapshot():
    engine = Xorshift1024Star(CANONICAL_SEED)
    snapshot = engine.state
    engine.next_raw()
    assert snapshot == CANONICAL_SEED
    assert engine.state != snapshot


@pytest.mark.parametrize(
    "seed",
    [
        CANONICAL_SEED[:15],
        CANONICAL_SEED + (1,),
        (0,) * 16,
        (-1,) + CANONICAL_SEED[1:],
        (MASK64 + 1,) + CANONICAL_SEED[1:],
        (1.5,) + CANONICAL_SEED[1:],
        (True,) + CANONICAL_SEED[1:],
        "0123456789abcdef",
        42,
    ],
)
def test_invalid_seeds_rejected(seed):
    with pytest.raises(PreconditionError):
        validate_seed(seed)


def test_single_nonzero_word_is_accepted():
    seed = (0,) * 15 + (1,)
    assert validate_seed(seed) == seed


def test_numpy_uint64_seed_is_accepted():
    seed = np.array(CANONICAL_SEED, dtype=np.uint64)
    assert validate_seed(seed) == CANONICAL_SEED
    assert all(type(word) is int for word in validate_seed(seed))
    rng = SeededRandom(seed)
    assert [rng.next_raw() for _ in range(5)] == list(CANONICAL_RAW[:5])


def test_numpy_float_words_rejected():
    with pytest.raises(PreconditionError):
        validate_seed((np.float64(1.0),) + CANONICAL_SEED[1:])
