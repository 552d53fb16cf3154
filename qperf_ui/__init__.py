"""QPerformance desktop UI: select inputs, run qperf, save the CSV output."""

__version__ = "0.1.0"
