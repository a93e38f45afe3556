import pytest

from patternkit.signals import (
    HighFrequencySignal,
    HighToLowFrequencyAdapter,
    LowFrequencySignal,
    SignalReader,
    main,
    sample_bits,
)

LOW_RAW = 0b10011001100010000000100100011001
HIGH_RAW = 0b10011001100010010000100100011001
EXPECTED = 0b11110101

SAMPLED_MASK = sum(1 << (31 - 4 * k) for k in range(8))


def test_frequencies():
    assert HighFrequencySignal(0).freq == 2
    assert LowFrequencySignal(0).freq == 4


def test_sample_known_words():
    assert sample_bits(LOW_RAW, 4) == EXPECTED
    assert sample_bits(HIGH_RAW, 4) == EXPECTED


def test_sample_zero():
    assert sample_bits(0, 4) == 0


@pytest.mark.parametrize("k", range(8))
def test_single_sampled_bit_lands_in_order(k):
    assert sample_bits(1 << (31 - 4 * k), 4) == 1 << (7 - k)


@pytest.mark.parametrize("raw", [LOW_RAW, HIGH_RAW, 0x12345678, 0xDEADBEEF])
def test_unsampled_bits_are_ignored(raw):
    assert sample_bits(raw, 4) == sample_bits(raw & SAMPLED_MASK, 4)


def test_negative_matches_twos_complement():
    assert sample_bits(-1, 4) == sample_bits(0xFFFFFFFF, 4)
    assert sample_bits(LOW_RAW - (1 << 32), 4) == sample_bits(LOW_RAW, 4)


def test_result_fits_in_a_byte():
    for raw in (0xFFFFFFFF, LOW_RAW, 0x0F0F0F0F):
        for step in (1, 2, 3, 4, 5):
            assert 0 <= sample_bits(raw, step) <= 255


@pytest.mark.parametrize("step", [0, -4])
def test_bad_step(step):
    with pytest.raises(ValueError):
        sample_bits(LOW_RAW, step)


def test_adapter_reads_low_frequency():
    adapter = HighToLowFrequencyAdapter(HighFrequencySignal(HIGH_RAW))
    assert adapter.get_signal() == EXPECTED


@pytest.mark.parametrize("raw", [LOW_RAW, HIGH_RAW, 0x12345678])
def test_reader_agrees_for_both_kinds(raw):
    reader = SignalReader()
    low = reader.get_signal(LowFrequencySignal(raw))
    high = reader.get_signal(HighFrequencySignal(raw))
    assert low == high == sample_bits(raw, 4)


def test_main_writes_bytes(capsysbinary):
    assert main([]) == 0
    out = capsysbinary.readouterr().out
    assert out == (
        b"Low Frequency Signal: " + bytes([EXPECTED]) + b"\n"
        b"High Frequency Signal: " + bytes([EXPECTED]) + b"\n"
    )