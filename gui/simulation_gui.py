from __future__ import annotations
import tkinter as tk
from tkinter import IntVar, DoubleVar
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
import matplotlib.pyplot as plt
from typing import Optional
import logging

# -----------------------
# Engine / Simulation imports
# -----------------------
from chamber.constants import MIN_TEMPERATURE_C, MAX_TEMPERATURE_C, MAX_COUNT
from chamber.simulation_manager import SimulationManager
# -----------------------
# Visualization imports
# -----------------------
from visual.renderer import render_snapshot
from visual.colors import VISUAL_BG
from gui.ui_constants import COLORS, FONT_FAMILY, FONT_SIZES, PADDING, FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class ChamberGUI:
    """
    Classroom window for the H2 + Cl2 chamber.

    Students see a temperature slider, a Cl2 slider and a restart button.
    Two keys are not advertised on screen:
      P  show / hide the instructor diagnostic
      T  toggle trap mode (reaction almost blocked at low temperature)
    """

    def __init__(self, sim: Optional[SimulationManager] = None, title: str = "H2 + Cl2 reaction chamber"):
        self.sim: SimulationManager = sim or SimulationManager()
        self.root = tk.Tk()
        self.root.title(title)
        self.root.configure(bg=COLORS['background'])

        self.temp_var = DoubleVar(value=self.sim.temperature_c)
        self.cl2_var = IntVar(value=self.sim.cl2_count)

        self.canvas: Optional[FigureCanvasTkAgg] = None
        self.figure = None
        self.ax = None
        self._after_id: Optional[str] = None

    # -----------------------
    # Tkinter GUI helpers
    # -----------------------
    def start(self):
        self.build()
        self._schedule()
        self.root.mainloop()

    def build(self):
        controls = tk.Frame(self.root, bg=COLORS['background'])
        controls.pack(side='top', fill='x', padx=PADDING['large'], pady=PADDING['medium'])
        font = (FONT_FAMILY, FONT_SIZES['label'])
        small = (FONT_FAMILY, FONT_SIZES['small'])
        label_style = dict(font=font, bg=COLORS['background'], fg=COLORS['text_primary'])
        scale_style = dict(font=small, bg=COLORS['background'], fg=COLORS['text_primary'],
                           highlightthickness=0, orient='horizontal')

        tk.Label(controls, text="Temperature (°C)", **label_style).grid(row=0, column=0, sticky='w')
        tk.Scale(controls, from_=MIN_TEMPERATURE_C, to=MAX_TEMPERATURE_C, variable=self.temp_var,
                 command=self._on_temperature, length=220, **scale_style).grid(row=0, column=1, padx=PADDING['medium'])

        tk.Label(controls, text="Green molecules", **label_style).grid(row=0, column=2, sticky='w')
        tk.Scale(controls, from_=self.sim.h2_count + 1, to=MAX_COUNT, variable=self.cl2_var,
                 length=180, **scale_style).grid(row=0, column=3, padx=PADDING['medium'])

        tk.Button(controls, text="Restart", command=self.restart, font=font,
                  bg=COLORS['accent'], fg=COLORS['background'],
                  activebackground=COLORS['accent']).grid(row=0, column=4, padx=PADDING['medium'])

        state = self.sim.state
        self.figure = plt.figure(figsize=(state.width / 100.0, state.height / 100.0), facecolor=VISUAL_BG)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.canvas = FigureCanvasTkAgg(self.figure, master=self.root)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill='both', expand=True)

        self.root.bind("<KeyPress>", self._on_key)

    # -----------------------
    # Handlers
    # -----------------------
    def _on_temperature(self, _value=None):
        self.sim.temperature_c = float(self.temp_var.get())

    def _on_key(self, event):
        key = (event.char or "").lower()
        if key == "p":
            self.sim.toggle_diagnostics()
        elif key == "t":
            self.sim.toggle_trap_mode()

    def restart(self):
        """Cancel the pending frame before installing the new state."""
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.sim.cl2_count = int(self.cl2_var.get())
        self.sim.reset()
        self._schedule()

    # -----------------------
    # Frame loop
    # -----------------------
    def _schedule(self):
        self._after_id = self.root.after(FRAME_INTERVAL_MS, self._frame)

    def _frame(self):
        self._after_id = None
        try:
            snapshot = self.sim.step()
            if snapshot is not None and self.ax is not None:
                diag = self.sim.diagnostics() if self.sim.show_diagnostics else None
                render_snapshot(snapshot, ax=self.ax, diagnostics=diag)
                self.canvas.draw_idle()
        except Exception:
            logger.exception("Frame update failed.")
        self._schedule()
