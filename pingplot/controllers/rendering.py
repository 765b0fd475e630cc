import numpy as np
import plotext as plt

from .. import constants
from ..events import INPUT


def format_tick(value):
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"


def x_labels(window):
    low, high = window
    return [format_tick(low), format_tick((low + high) / 2.0), format_tick(high)]


def build_chart(snapshot, width, height, y_bounds=constants.Y_BOUNDS):
    """Render one frame of the ping chart as a string of `height` lines."""
    low, high = snapshot.window
    y_low, y_high = y_bounds

    plt.clf()
    plt.theme("clear")
    plt.plotsize(width, height)
    plt.frame(True)
    plt.title(constants.CHART_TITLE)

    plt.xlabel("X Axis")
    plt.xlim(low, high)
    plt.xticks([low, (low + high) / 2.0, high], x_labels(snapshot.window))

    plt.ylabel("Y Axis")
    plt.ylim(y_low, y_high)
    plt.yticks([y_low, y_high], [format_tick(y_low), format_tick(y_high)])

    if snapshot.points:
        ys = np.clip(snapshot.ys(), y_low, y_high)
        plt.plot(
            snapshot.xs().tolist(),
            ys.tolist(),
            label=constants.DATASET_NAME,
            color=constants.LINE_COLOR,
            marker="dot",
        )

    return plt.build().rstrip("\n")


def draw(series, lock, terminal, y_bounds=constants.Y_BOUNDS):
    with lock:
        snapshot = series.snapshot()
    width, height = terminal.size()
    terminal.draw(build_chart(snapshot, width, height, y_bounds))


def run(series, lock, terminal, events, quit_key=constants.QUIT_KEY, y_bounds=constants.Y_BOUNDS):
    """Redraw after every key press or tick until `quit_key` is pressed."""
    while True:
        draw(series, lock, terminal, y_bounds)
        event = events.next()
        if event.kind == INPUT and event.key == quit_key:
            break
