# -*- coding: utf-8 -*-
"""
Graphical window for manual 2048 play.

The window draws a grid with Matplotlib and forwards key presses to a handler. It holds no
game state: the caller passes the cells and a status line every time it redraws.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    Matplotlib window showing a 2048 grid.

    Parameters
    ----------
    title : str
        The title of the window.
    size : int
        Side of the grid (e.g., 4 for a 4x4 grid).
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
    }
    DEFAULT_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        # ##: Free the default Matplotlib shortcuts (s, r, arrows) for the game.
        for name in [key for key in plt.rcParams if key.startswith("keymap.")]:
            plt.rcParams[name] = []

        self.size = size
        self.fig = plt.figure(facecolor="#BBADA0")
        self.fig.canvas.manager.set_window_title(title)
        self.status = self.fig.suptitle("", fontsize="large", fontweight="bold")
        self.closed = False

        self.axes = []
        self.texts = []
        self._setup_cells()
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_cells(self):
        # ##: One subplot per cell, without ticks or labels.
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.9, wspace=0.05, hspace=0.05)
        for index in range(self.size * self.size):
            ax = self.fig.add_subplot(self.size, self.size, index + 1)
            ax.set_xticks([])
            ax.set_yticks([])
            self.axes.append(ax)
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_image(self, board: ndarray, status: str = ""):
        """
        Redraw the grid.

        Parameters
        ----------
        board : ndarray
            The cells to display, row by row.
        status : str, optional
            Text shown above the grid (score, win or loss message).
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))
        self.status.set_text(status)

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """Call ``key_handler`` with every key press event of the window."""
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """Show the window and run the Matplotlib event loop, blocking unless ``block`` is False."""
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
