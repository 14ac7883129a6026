#!/usr/bin/env python3
"""
GUI: pick a CSV file and write the .vcf next to it.

Usage:
    python -m src.gui
"""

import logging
import tkinter as tk
from tkinter import filedialog, ttk

import src.writer as writer

WINDOW_TITLE = "VCard Generator"
WINDOW_SIZE = "300x100"
OPEN_LABEL = "Open CSV file"
DONE_MESSAGE = "Done !"
ERROR_MESSAGE = "Invalid input file"

logger = logging.getLogger("csv2vcf.gui")


def handle_selection(path: str) -> str:
    """Run the pipeline on path and return the status line to display."""
    try:
        writer.convert_csv(path)
    except (OSError, ValueError) as exc:
        logger.warning("Conversion of %s failed: %s", path, exc)
        return ERROR_MESSAGE
    return DONE_MESSAGE


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry(WINDOW_SIZE)
        self.resizable(False, False)
        self.status = tk.StringVar(value="")

        self._build_ui()

    def _build_ui(self):
        main = ttk.Frame(self)
        main.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        ttk.Button(main, text=OPEN_LABEL, command=self.on_open, width=24).pack(ipady=6)
        ttk.Label(main, textvariable=self.status).pack(pady=(6, 0))

    def on_open(self):
        path = filedialog.askopenfilename(
            title=OPEN_LABEL,
            filetypes=[("CSV files", "*.csv")],
        )
        # dialog cancelled
        if not path:
            return
        self.status.set(handle_selection(path))


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)-5s  %(message)s")
    try:
        app = App()
        app.mainloop()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
