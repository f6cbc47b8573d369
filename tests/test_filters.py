import pytest

from flocknoise.filters import BiquadFilter, MultiBiquad


def _coefficients(f):
    return (f.b0, f.b1, f.b2, f.a1, f.a2)


def test_band_pass_coefficient_symmetry():
    f = BiquadFilter(44100.0)
    f.make_band_pass(1000.0, 5.0, 2.0)
    assert f.b1 == 0.0
    assert f.b2 == -f.b0
    assert f.b0 > 0


def test_band_pass_depends_only_on_cutoff_over_sample_rate():
    a = BiquadFilter(44100.0)
    b = BiquadFilter()
    b.prepare_to_play(88200.0)
    a.make_band_pass(1000.0, 5.0, 3.0)
    b.make_band_pass(2000.0, 5.0, 3.0)
    assert _coefficients(a) == pytest.approx(_coefficients(b))


def test_band_pass_ignores_gain():
    a = BiquadFilter(48000.0)
    b = BiquadFilter(48000.0)
    a.make_band_pass(500.0, 0.0, 1.5)
    b.make_band_pass(500.0, 12.0, 1.5)
    assert _coefficients(a) == _coefficients(b)


def test_first_output_from_rest_is_b0_times_input():
    f = BiquadFilter(44100.0)
    f.make_band_pass(1000.0, 5.0, 2.0)
    assert f.filter_sample(0.5) == pytest.approx(f.b0 * 0.5)


def test_state_shifts_after_each_sample():
    f = BiquadFilter(44100.0)
    f.make_band_pass(1000.0, 5.0, 2.0)
    first = f.filter_sample(1.0)
    second = f.filter_sample(0.0)
    assert f.z1 == second
    assert f.z2 == first


def test_band_pass_keeps_filter_state():
    f = BiquadFilter(44100.0)
    f.make_band_pass(1000.0, 5.0, 2.0)
    f.filter_sample(1.0)
    f.filter_sample(0.25)
    state = (f.z1, f.z2)
    f.make_band_pass(3000.0, 5.0, 4.0)
    assert (f.z1, f.z2) == state


def test_low_shelf_with_zero_gain_is_flat():
    f = BiquadFilter(44100.0)
    f.make_low_shelf(800.0, 0.0)
    assert f.b0 == pytest.approx(1.0)
    assert f.b1 == pytest.approx(f.a1)
    assert f.b2 == pytest.approx(f.a2)


def test_low_shelf_resets_state():
    f = BiquadFilter(44100.0)
    f.make_band_pass(1000.0, 5.0, 2.0)
    f.filter_sample(1.0)
    f.make_low_shelf(800.0, 6.0)
    assert (f.z1, f.z2) == (0.0, 0.0)
    assert f.filter_sample(0.5) == pytest.approx(f.b0 * 0.5)


def test_zero_q_raises():
    f = BiquadFilter(44100.0)
    with pytest.raises(ZeroDivisionError):
        f.make_band_pass(1000.0, 5.0, 0.0)


def test_multi_biquad_matches_single_filter():
    bank = MultiBiquad(3, 44100.0)
    single = BiquadFilter(44100.0)
    bank.make_bandpass(1200.0, 5.0, 2.0, 1)
    single.make_band_pass(1200.0, 5.0, 2.0)
    inputs = [1.0, -0.5, 0.25, 0.0, 0.75]
    assert [bank.filter_sample(x, 1) for x in inputs] == [single.filter_sample(x) for x in inputs]


def test_multi_biquad_filters_are_independent():
    bank = MultiBiquad(2, 44100.0)
    bank.make_bandpass(1200.0, 5.0, 2.0, 0)
    bank.make_bandpass(1200.0, 5.0, 2.0, 1)
    for x in (1.0, -1.0, 0.5):
        bank.filter_sample(x, 0)
    reference = MultiBiquad(2, 44100.0)
    reference.make_bandpass(1200.0, 5.0, 2.0, 1)
    assert bank.filter_sample(0.3, 1) == reference.filter_sample(0.3, 1)


def test_multi_biquad_prepare_to_play_reaches_every_filter():
    bank = MultiBiquad(4)
    bank.prepare_to_play(96000.0)
    assert len(bank) == 4
    assert all(bq.sample_rate == 96000.0 for bq in bank.biquads)


def test_multi_biquad_index_out_of_range():
    bank = MultiBiquad(2)
    with pytest.raises(IndexError):
        bank.filter_sample(0.0, 2)
    with pytest.raises(IndexError):
        bank.make_bandpass(1000.0, 5.0, 1.0, -1)