from __future__ import annotations

import tkinter as tk
from typing import Sequence

PALETTE = ("#4A90E2", "#F5A623", "#BD10E0", "#7ED321", "#E01050")


class _CanvasChart:
    """A chart owned by its view. `set_data` wipes the canvas and redraws from scratch."""

    def __init__(self, parent, title: str, height: int = 220):
        self.title = title
        self.canvas = tk.Canvas(parent, height=height, bg="#f8fafc", highlightthickness=1, highlightbackground="#cbd5e1")
        self._labels: tuple[str, ...] = ()
        self._values: tuple[float, ...] = ()
        self.canvas.bind("<Configure>", lambda _e: self._redraw())

    def set_data(self, labels: Sequence[str], values: Sequence[float]) -> None:
        self._labels = tuple(labels)
        self._values = tuple(float(v) for v in values)
        self._redraw()

    def _size(self, default_w: int) -> tuple[int, int]:
        w = self.canvas.winfo_width()
        h = self.canvas.winfo_height()
        return (w if w > 1 else default_w), (h if h > 1 else int(self.canvas["height"]))

    def _redraw(self) -> None:
        self.canvas.delete("all")
        w, h = self._size(560)
        self.canvas.create_text(12, 16, text=self.title, anchor="w", font=("Segoe UI", 10, "bold"), fill="#0f172a")
        if not self._values:
            self.canvas.create_text(w // 2, h // 2, text="No data", fill="#64748b")
            return
        self._draw(w, h)

    def _draw(self, w: int, h: int) -> None:
        raise NotImplementedError


class LineChart(_CanvasChart):
    def _draw(self, w: int, h: int) -> None:
        vals = self._values
        minv, maxv = min(min(vals), 0.0), max(vals)
        span = (maxv - minv) or 1
        points = []
        step = max(len(vals) // 6, 1)
        for i, (label, v) in enumerate(zip(self._labels, vals)):
            x = 40 + int(i * (w - 80) / max(len(vals) - 1, 1))
            y = h - 30 - int((v - minv) * (h - 70) / span)
            points.extend([x, y])
            self.canvas.create_oval(x - 3, y - 3, x + 3, y + 3, fill="#4A90E2", outline="")
            if i % step == 0:
                self.canvas.create_text(x, h - 14, text=label, font=("Segoe UI", 8), fill="#475569")
        if len(points) >= 4:
            self.canvas.create_line(*points, fill="#4A90E2", width=3)
        self.canvas.create_text(w - 12, 16, text=f"max {maxv:.2f}", anchor="e", font=("Segoe UI", 8), fill="#475569")


class DoughnutChart(_CanvasChart):
    def _draw(self, w: int, h: int) -> None:
        total = sum(v for v in self._values if v > 0)
        if total <= 0:
            self.canvas.create_text(w // 2, h // 2, text="No data", fill="#64748b")
            return

        size = min(h - 50, (w // 2) - 20)
        x0, y0 = 20, 34
        x1, y1 = x0 + size, y0 + size
        start = 90.0
        for i, (label, v) in enumerate(zip(self._labels, self._values)):
            color = PALETTE[i % len(PALETTE)]
            if v > 0:
                extent = -360.0 * v / total
                # A single full slice needs to stop short of 360 or Tk draws nothing.
                if abs(extent) >= 360.0:
                    extent = -359.99
                self.canvas.create_arc(x0, y0, x1, y1, start=start, extent=extent, fill=color, outline="white")
                start += extent

            ly = y0 + i * 18
            self.canvas.create_rectangle(x1 + 24, ly, x1 + 36, ly + 12, fill=color, outline="")
            self.canvas.create_text(x1 + 42, ly + 6, text=f"{label}: {v:.2f}", anchor="w", font=("Segoe UI", 9), fill="#0f172a")

        hole = size * 0.3
        cx, cy = (x0 + x1) / 2, (y0 + y1) / 2
        self.canvas.create_oval(cx - hole, cy - hole, cx + hole, cy + hole, fill="#f8fafc", outline="")
