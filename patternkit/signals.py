"""Adapter that reads high-frequency signals as if they were low-frequency ones."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

WORD_BITS = 32
LOW_FREQUENCY = 4
HIGH_FREQUENCY = 2


def sample_bits(raw: int, step: int) -> int:
    """Read every step-th bit of a 32-bit word from the top down, packed into one byte."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    word = raw & ((1 << WORD_BITS) - 1)
    output = 0
    for position in range(WORD_BITS - 1, -1, -step):
        output = ((output << 1) | ((word >> position) & 1)) & 0xFF
    return output


class Signal(ABC):
    """A raw 32-bit signal sampled at a known frequency."""

    def __init__(self, sig: int) -> None:
        self.sig = sig

    @property
    @abstractmethod
    def freq(self) -> int:
        """The sampling frequency of this signal."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sig:#034b})"


class HighFrequencySignal(Signal):
    @property
    def freq(self) -> int:
        return HIGH_FREQUENCY


class LowFrequencySignal(Signal):
    @property
    def freq(self) -> int:
        return LOW_FREQUENCY


class HighToLowFrequencyAdapter:
    """Presents a signal through the low-frequency reading."""

    def __init__(self, signal: Signal) -> None:
        self.signal = signal

    def get_signal(self) -> int:
        return sample_bits(self.signal.sig, LOW_FREQUENCY)


class SignalReader:
    """Reads any signal as a low-frequency byte."""

    def get_signal(self, signal: Signal) -> int:
        if signal.freq == LOW_FREQUENCY:
            return HighToLowFrequencyAdapter(HighFrequencySignal(signal.sig)).get_signal()
        return sample_bits(signal.sig, LOW_FREQUENCY)


def main(argv: list[str] | None = None) -> int:
    low = LowFrequencySignal(0b10011001100010000000100100011001)
    high = HighFrequencySignal(0b10011001100010010000100100011001)
    reader = SignalReader()

    sys.stdout.flush()
    out = sys.stdout.buffer
    out.write(b"Low Frequency Signal: " + bytes([reader.get_signal(low)]) + b"\n")
    out.write(b"High Frequency Signal: " + bytes([reader.get_signal(high)]) + b"\n")
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())