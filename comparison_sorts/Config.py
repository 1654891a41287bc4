from pathlib import Path

MAX_SAMPLE_TIME_MS = 1000
SAMPLE_SEED = 20240229
ACTUALS_MAX_LENGTH = 5

STATISTICS_NS = list(range(2, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
RESULT_DIR = Path("logs/statistics.csv")
PLOT_PATH = Path("logs/statistics.html")
