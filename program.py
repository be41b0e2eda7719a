import logging

import numpy as np
import tkinter as tk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from tkinter import ttk

from config import CORNERS_PER_BLOB
from errors import CapacityExceeded
from hull_point_set import HullPointSet, new_scratch_stack
from visualization import plot_hulls

LEFT_BUTTON, MIDDLE_BUTTON, RIGHT_BUTTON = 1, 2, 3


def setup_logging():
    """Configures logging for the demo."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def random_groups(n_blobs: int, spread: float, rng: np.random.Generator) -> list[np.ndarray]:
    """
    Two groups of blob corners, normally distributed around
    random centres inside [-1, 1].
    """
    groups = []
    for _ in range(2):
        center = rng.uniform(-0.7, 0.7, size=2)
        groups.append(rng.normal(center, spread, size=(n_blobs * CORNERS_PER_BLOB, 2)))
    return groups


class HullsGUI:
    """
    Left click adds a point to the first hull, right click to the second one,
    middle click clears both. The background shows whether the hulls intersect.
    """

    def __init__(self, root):
        self.root = root
        self.root.title("Convex hull intersection")
        self.root.geometry("800x850")

        self.hulls = [HullPointSet(), HullPointSet()]
        self.stack = new_scratch_stack()
        self.intersect = False
        self.rng = np.random.default_rng()

        self.setup_ui()
        self.redraw()

    def setup_ui(self):
        toolbar = ttk.Frame(self.root)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=5, pady=2)

        ttk.Button(toolbar, text="Random groups", command=self.generate_groups).pack(side=tk.LEFT, padx=2)
        ttk.Button(toolbar, text="Clear", command=self.clear).pack(side=tk.LEFT, padx=2)

        self.fig = Figure(figsize=(8, 8))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self.root)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        self.canvas.mpl_connect('button_press_event', self.on_click)

        self.status_bar = ttk.Label(self.root, text="Ready", relief=tk.SUNKEN)
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    def on_click(self, event):
        if event.inaxes is not self.ax:
            return

        if event.button == MIDDLE_BUTTON:
            self.clear()
            return

        target = {LEFT_BUTTON: 0, RIGHT_BUTTON: 1}.get(event.button)
        if target is None:
            return

        hull = self.hulls[target]
        try:
            hull.add_point((event.xdata, event.ydata))
        except CapacityExceeded as e:
            logging.warning(f"Point ignored: {e}")
            return
        hull.compute(self.stack)
        self.redraw()

    def generate_groups(self):
        for hull, group in zip(self.hulls, random_groups(20, 0.1, self.rng)):
            hull.clear()
            hull.add_points(group)
            hull.compute(self.stack)
        self.redraw()

    def clear(self):
        for hull in self.hulls:
            hull.clear()
        self.intersect = False
        self.redraw()

    def redraw(self):
        self.ax.clear()
        self.intersect = plot_hulls(self.hulls, ax=self.ax)
        self.ax.set_xlim(-1, 1)
        self.ax.set_ylim(-1, 1)
        self.ax.set_aspect('equal')
        self.canvas.draw()

        counts = ", ".join(
            f"{hull.point_count} points / {'-' if hull.dirty else hull.boundary_count} on hull"
            for hull in self.hulls
        )
        state = "intersect" if self.intersect else "disjoint"
        self.status_bar.config(text=f"{counts} | {state}")
        logging.info(f"Hulls: {counts}, {state}")


if __name__ == "__main__":
    setup_logging()
    root = tk.Tk()
    _ = HullsGUI(root)
    root.mainloop()
