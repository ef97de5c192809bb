"""
Convex Partition Demo
Generates a random concave polygon, optionally with a hole, and partitions it into
convex parts with polypart (Hertel-Mehlhorn or optimal Keil-Snoeyink).
"""

import numpy as np
import pyvista as pv
from PySide6 import QtCore, QtWidgets
from pyvistaqt import BackgroundPlotter

import polypart

ALGORITHMS = ("Hertel-Mehlhorn", "Optimal (Keil-Snoeyink)")


# ─── Polygon generation ───────────────────────────────────────────────────────

def generate_concave_polygon(n_sides, rng):
    """
    Random star-shaped polygon around the origin, CCW, with every third vertex
    pulled inwards. Angle gaps are bounded so a disc of radius 0.35 stays inside.
    """
    spacing = 2 * np.pi / n_sides
    angles = np.arange(n_sides) * spacing + rng.uniform(-0.3, 0.3, n_sides) * spacing
    radii = rng.uniform(2.0, 3.2, n_sides)
    inner = np.arange(n_sides) % 3 == 1
    radii[inner] = rng.uniform(0.8, 1.3, inner.sum())
    return np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])


def generate_hole(n_sides=5, radius=0.35):
    """Regular polygon around the origin in clockwise order."""
    angles = -np.linspace(0, 2 * np.pi, n_sides, endpoint=False)
    return np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])


def _distinct_colors(n):
    """Return n visually distinct RGB tuples using HSV hue rotation."""
    colors = []
    for i in range(n):
        h6 = (i / max(n, 1)) * 6.0
        x = 1.0 - abs(h6 % 2 - 1)
        if   h6 < 1: r, g, b = 1, x, 0
        elif h6 < 2: r, g, b = x, 1, 0
        elif h6 < 3: r, g, b = 0, 1, x
        elif h6 < 4: r, g, b = 0, x, 1
        elif h6 < 5: r, g, b = x, 0, 1
        else:         r, g, b = 1, 0, x
        f = 0.72
        colors.append((r * f + (1 - f), g * f + (1 - f), b * f + (1 - f)))
    return colors


# ─── Demo class ───────────────────────────────────────────────────────────────

class ConvexPartitionDemo:
    def __init__(self):
        self.plotter = BackgroundPlotter(
            window_size=(1200, 800),
            title="Convex Partition of Polygons",
        )
        self.plotter.set_background("white")

        self._n_sides = 9
        self._seed = 7
        self._algorithm = 0
        self._with_hole = False
        self._points = None
        self._contours = []
        self._parts = []
        self._ok = False
        self._other = None
        self._actors = []

        self._setup_controls()
        self._regenerate()

    # ── Controls ──────────────────────────────────────────────────────────────

    def _setup_controls(self):
        dock = QtWidgets.QDockWidget("Controls", self.plotter)
        dock.setAllowedAreas(QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea)
        panel = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(panel)

        layout.addWidget(QtWidgets.QLabel("Number of sides"))
        self._sides_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self._sides_slider.setMinimum(5)
        self._sides_slider.setMaximum(40)
        self._sides_slider.setValue(self._n_sides)
        self._sides_val_label = QtWidgets.QLabel(str(self._n_sides))
        self._sides_slider.valueChanged.connect(self._on_sides_changed)
        layout.addWidget(self._sides_slider)
        layout.addWidget(self._sides_val_label)

        layout.addWidget(QtWidgets.QLabel("Algorithm"))
        self._algo_combo = QtWidgets.QComboBox()
        self._algo_combo.addItems(ALGORITHMS)
        self._algo_combo.currentIndexChanged.connect(self._on_algorithm_changed)
        layout.addWidget(self._algo_combo)

        self._hole_check = QtWidgets.QCheckBox("Cut a hole (Hertel-Mehlhorn only)")
        self._hole_check.toggled.connect(self._on_hole_toggled)
        layout.addWidget(self._hole_check)

        regen_btn = QtWidgets.QPushButton("Randomize")
        regen_btn.clicked.connect(self._on_randomize)
        layout.addWidget(regen_btn)

        self._info_label = QtWidgets.QLabel("")
        self._info_label.setWordWrap(True)
        layout.addWidget(self._info_label)

        layout.addStretch(1)
        dock.setWidget(panel)
        self.plotter.app_window.addDockWidget(QtCore.Qt.RightDockWidgetArea, dock)

    def _on_sides_changed(self, value):
        self._n_sides = value
        self._sides_val_label.setText(str(value))
        self._regenerate()

    def _on_algorithm_changed(self, index):
        self._algorithm = index
        self._partition()
        self._draw()

    def _on_hole_toggled(self, checked):
        self._with_hole = checked
        self._regenerate()

    def _on_randomize(self):
        self._seed = np.random.randint(0, 100_000)
        self._regenerate()

    # ── Generation & drawing ──────────────────────────────────────────────────

    def _regenerate(self):
        rng = np.random.RandomState(self._seed)
        outer = generate_concave_polygon(self._n_sides, rng)
        self._contours = [list(range(len(outer)))]
        if self._with_hole:
            hole = generate_hole()
            self._points = np.vstack([outer, hole])
            self._contours.append(list(range(len(outer), len(self._points))))
        else:
            self._points = outer
        self._partition()
        self._draw()

    def _partition(self):
        self._parts = []
        if self._with_hole:
            self._ok = polypart.apply(
                self._points, self._contours[:1], self._contours[1:], self._parts
            )
            self._other = None
            return

        other = []
        if self._algorithm == 0:
            self._ok = polypart.apply_hm(self._points, self._parts)
            polypart.apply_opt(self._points, other)
        else:
            self._ok = polypart.apply_opt(self._points, self._parts)
            polypart.apply_hm(self._points, other)
        self._other = len(other)

    def _draw(self):
        for actor in self._actors:
            self.plotter.remove_actor(actor)
        self._actors.clear()

        pts = self._points
        colors = _distinct_colors(len(self._parts))

        # Filled convex parts (slightly below outline)
        for color, part in zip(colors, self._parts):
            verts = pts[list(part)]
            nv = len(verts)
            pts3d = np.column_stack([verts, np.zeros(nv)])
            face = np.array([nv] + list(range(nv)), dtype=np.intp)
            mesh = pv.PolyData(pts3d, faces=face)
            actor = self.plotter.add_mesh(
                mesh,
                color=color,
                opacity=0.70,
                show_edges=True,
                edge_color="dimgray",
                line_width=1,
            )
            self._actors.append(actor)

        # Contour outlines (drawn slightly above fills)
        pts3d = np.column_stack([pts, np.full(len(pts), 0.01)])
        cells = []
        for contour in self._contours:
            m = len(contour)
            for i in range(m):
                cells += [2, contour[i], contour[(i + 1) % m]]
        outline = pv.PolyData(pts3d)
        outline.lines = np.array(cells, dtype=np.intp)
        actor = self.plotter.add_mesh(outline, color="black", line_width=3)
        self._actors.append(actor)

        actor = self.plotter.add_mesh(
            pv.PolyData(pts3d),
            color="black",
            point_size=10,
            render_points_as_spheres=True,
        )
        self._actors.append(actor)

        lines = [f"Vertices: {len(pts)}"]
        if not self._ok:
            lines.append("Partition failed")
        elif self._with_hole:
            lines.append(f"Convex parts (Hertel-Mehlhorn with hole): {len(self._parts)}")
        else:
            lines.append(f"Convex parts ({ALGORITHMS[self._algorithm]}): {len(self._parts)}")
            lines.append(f"Convex parts ({ALGORITHMS[1 - self._algorithm]}): {self._other}")
        self._info_label.setText("\n".join(lines))

        self.plotter.enable_parallel_projection()
        self.plotter.view_xy()
        self.plotter.reset_camera()
        self.plotter.render()

    def show(self):
        self.plotter.show()
        self.plotter.app.exec()


def main():
    demo = ConvexPartitionDemo()
    demo.show()


if __name__ == "__main__":
    main()
