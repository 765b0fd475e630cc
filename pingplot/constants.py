PING_PATH = "/bin/ping"
DEFAULT_HOST = "8.8.8.8"

# Number of samples kept on screen; also the width of the x-axis window.
DEFAULT_CAPACITY = 100

# Y axis is fixed; latencies above the top are drawn off-chart.
Y_BOUNDS = (0.0, 1000.0)

# Frame poll timeout. Sampling runs as fast as ping returns.
DEFAULT_TICK_RATE_MS = 250

QUIT_KEY = "q"

CHART_TITLE = "Ping Time"
DATASET_NAME = "ping_times"
LINE_COLOR = "yellow"
