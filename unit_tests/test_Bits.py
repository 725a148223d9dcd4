from pyadjgraph.Bits import Bits


def test_new_bits_are_clear():
    b = Bits(10)
    assert len(b) == 10
    assert b.count() == 0
    assert b.slice() == []
    assert not b.bit(3)


def test_set_and_clear_bit():
    b = Bits(8)
    b.set_bit(5)
    b.set_bit(1)
    assert b.bit(5) and 1 in b
    assert b.slice() == [1, 5]
    b.clear_bit(5)
    assert b.slice() == [1]


def test_ones_sets_every_bit():
    b = Bits.ones(5)
    assert b.slice() == [0, 1, 2, 3, 4]
    assert b.count() == 5


def test_fill_and_clear():
    b = Bits(4)
    b.fill()
    assert b == Bits.ones(4)
    b.clear()
    assert b == Bits(4)


def test_iteration_is_ascending():
    b = Bits(100)
    for n in (70, 3, 64, 0):
        b.set_bit(n)
    assert list(b) == [0, 3, 64, 70]


def test_equality_considers_capacity():
    assert Bits(3) != Bits(4)
    a = Bits(3)
    a.set_bit(2)
    c = Bits(3)
    c.set_bit(2)
    assert a == c


def test_reset_resizes_and_clears():
    b = Bits(0)
    b.reset(6)
    assert len(b) == 6
    assert b.count() == 0
    b.set_bit(5)
    b.reset(3)
    assert len(b) == 3
    assert b.slice() == []
