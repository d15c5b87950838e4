import pytest

from tetris_piece import KINDS, FallTimer, Kind, Piece, random_kind, rotation_states
from tetris_rng import RandomSource


@pytest.mark.parametrize("kind,count", [
    (Kind.I, 2), (Kind.O, 1), (Kind.T, 4), (Kind.S, 2),
    (Kind.Z, 2), (Kind.J, 4), (Kind.L, 4),
])
def test_rotation_state_counts(kind, count):
    assert len(rotation_states(kind)) == count


@pytest.mark.parametrize("kind", KINDS)
def test_every_state_has_four_blocks(kind):
    for m in rotation_states(kind):
        assert sum(v for row in m for v in row) == 4
        assert len({len(row) for row in m}) == 1


@pytest.mark.parametrize("kind", KINDS)
def test_rotation_is_cyclic(kind):
    p = Piece.spawn(kind)
    start = (p.rotation, p.x, p.y, p.matrix)
    for _ in range(len(p.states)):
        p.rotate()
    assert (p.rotation, p.x, p.y, p.matrix) == start


def test_spawn_anchor():
    p = Piece.spawn(Kind.T)
    assert (p.x, p.y, p.rotation) == (4, 0, 0)


def test_cells_offset_by_anchor():
    p = Piece(Kind.T, 0, 3, 5)
    assert sorted(p.cells()) == [(3, 6), (4, 5), (4, 6), (5, 6)]


def test_random_kind_is_reproducible():
    a = RandomSource(7)
    b = RandomSource(7)
    seq_a = [random_kind(a) for _ in range(50)]
    seq_b = [random_kind(b) for _ in range(50)]
    assert seq_a == seq_b
    assert set(seq_a) <= set(KINDS)


def test_random_kind_covers_catalog():
    rng = RandomSource(123)
    seen = {random_kind(rng) for _ in range(500)}
    assert seen == set(KINDS)


def test_reseed_replays_sequence():
    rng = RandomSource(3)
    first = [rng.next(0, 7) for _ in range(10)]
    rng.reseed()
    assert [rng.next(0, 7) for _ in range(10)] == first


def test_fall_timer_repeats():
    t = FallTimer(1.0)
    assert not t.tick(0.6)
    assert t.tick(0.6)
    assert t.elapsed == pytest.approx(0.2)
    assert not t.tick(0.5)
    assert t.tick(0.4)


def test_fall_timer_rejects_bad_period():
    with pytest.raises(ValueError):
        FallTimer(0)
