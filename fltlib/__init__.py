"""IIR low-pass, high-pass, band-pass and band-stop filters, rectifiers and resampling helpers."""

__version__ = "1.5.0"
__all__ = ["filter", "lowpass", "highpass", "bandpass", "bandstop", "rectifier", "cli"]