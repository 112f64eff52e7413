from geodatum.utils.functions import round_half_up


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(-1.55, 1) == -1.5

    # DMS seconds are rounded to 5 places
    assert round_half_up(3.7202961, 5) == 3.7203
    assert round_half_up(59.999999, 5) == 60.
