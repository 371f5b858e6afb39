"""Tkinter desktop GUI for the HTML Obfuscator.

WHY: Most users just want to paste markup, press a button, and copy the
result without touching a terminal or a file. The GUI is that
paste/obfuscate/copy loop in a single window.

HOW: A single ObfuscatorApp class builds the window: an input pane, an
Obfuscate button, a read-only output pane, a Copy button, and a notice
banner. The app implements the controller's TextSurface, Clipboard, and
NotificationSink interfaces over its own widgets and hands itself to an
ObfuscatorController, which owns all workflow branches and messages.

RULES:
- Obfuscation runs on the main thread; it takes milliseconds
- tkinter widgets are ONLY touched from the main thread
- Notices are colour-coded by severity, dismissible, and auto-hide
  after NOTICE_DURATION_S seconds
- The output pane is read-only for the user; only set_output() writes it
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional, Tuple

from html_obfuscator.config import (
    DEFAULT_UNIT_WIDTH,
    NOTICE_DURATION_S,
    UNIT_WIDTH_CHOICES,
    parse_unit_width,
)
from html_obfuscator.ui.controller import Clipboard, ObfuscatorController, TextSurface
from html_obfuscator.ui.notifications import LoggingSink, NotificationSink, Severity

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_WINDOW_TITLE = "HTML Obfuscator"
_WINDOW_MIN_WIDTH = 720
_WINDOW_MIN_HEIGHT = 560
_PAD = 8

# Severity -> (background, foreground)
_NOTICE_COLOURS: Dict[Severity, Tuple[str, str]] = {
    Severity.SUCCESS: ("#dcfce7", "#15803d"),
    Severity.ERROR: ("#fee2e2", "#b91c1c"),
    Severity.INFO: ("#fef9c3", "#a16207"),
}


class ObfuscatorApp(TextSurface, Clipboard, NotificationSink):
    """Main tkinter application for the HTML Obfuscator.

    RULES:
    - All workflow decisions are delegated to self._controller
    - self._notice_job holds the pending auto-hide callback, if any
    """

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._root.title(_WINDOW_TITLE)
        self._root.minsize(_WINDOW_MIN_WIDTH, _WINDOW_MIN_HEIGHT)

        self._notice_job: Optional[str] = None
        self._log_sink = LoggingSink()

        self._build_ui()

        self._controller = ObfuscatorController(
            surface=self,
            sink=self,
            clipboard=self,
            unit_width=parse_unit_width(DEFAULT_UNIT_WIDTH),
        )

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        """Build the main window layout."""
        main = ttk.Frame(self._root, padding=_PAD)
        main.pack(fill=tk.BOTH, expand=True)

        # --- Notice banner (hidden until a notice arrives) ---
        self._notice_frame = tk.Frame(main, padx=_PAD, pady=4)
        self._notice_label = tk.Label(self._notice_frame, anchor=tk.W, justify=tk.LEFT)
        self._notice_label.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self._notice_close = tk.Button(
            self._notice_frame, text="×", relief=tk.FLAT, command=self._hide_notice
        )
        self._notice_close.pack(side=tk.RIGHT)

        # --- Input ---
        self._input_frame = ttk.LabelFrame(main, text="Input HTML", padding=_PAD)
        self._input_frame.pack(fill=tk.BOTH, expand=True, pady=(0, _PAD))
        self._input_text = self._make_text_area(self._input_frame)

        # --- Actions ---
        btn_frame = ttk.Frame(main)
        btn_frame.pack(fill=tk.X, pady=(0, _PAD))

        self._obfuscate_btn = ttk.Button(
            btn_frame, text="Obfuscate", command=self._controller_obfuscate
        )
        self._obfuscate_btn.pack(side=tk.LEFT)

        ttk.Label(btn_frame, text="Unit width:").pack(side=tk.LEFT, padx=(16, 4))
        self._width_var = tk.StringVar(value=DEFAULT_UNIT_WIDTH)
        self._width_combo = ttk.Combobox(
            btn_frame,
            textvariable=self._width_var,
            values=list(UNIT_WIDTH_CHOICES),
            state="readonly",
            width=6,
        )
        self._width_combo.pack(side=tk.LEFT)
        self._width_combo.bind("<<ComboboxSelected>>", self._on_width_selected)

        self._copy_btn = ttk.Button(
            btn_frame, text="Copy to Clipboard", command=self._controller_copy
        )
        self._copy_btn.pack(side=tk.RIGHT)

        # --- Output ---
        output_frame = ttk.LabelFrame(main, text="Obfuscated HTML", padding=_PAD)
        output_frame.pack(fill=tk.BOTH, expand=True)
        self._output_text = self._make_text_area(output_frame)
        self._output_text.configure(state=tk.DISABLED)

    @staticmethod
    def _make_text_area(parent: ttk.LabelFrame) -> tk.Text:
        text = tk.Text(parent, height=10, wrap=tk.CHAR, undo=True, font=("TkFixedFont", 11))
        scrollbar = ttk.Scrollbar(parent, orient=tk.VERTICAL, command=text.yview)
        text.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        text.pack(fill=tk.BOTH, expand=True)
        return text

    # ------------------------------------------------------------------
    # Button handlers
    # ------------------------------------------------------------------

    def _controller_obfuscate(self) -> None:
        self._controller.obfuscate()

    def _controller_copy(self) -> None:
        self._controller.copy_output()

    def _on_width_selected(self, _event: tk.Event) -> None:
        self._controller.unit_width = parse_unit_width(self._width_var.get())

    # ------------------------------------------------------------------
    # TextSurface
    # ------------------------------------------------------------------

    def get_input(self) -> str:
        return self._input_text.get("1.0", "end-1c")

    def get_output(self) -> str:
        return self._output_text.get("1.0", "end-1c")

    def set_output(self, text: str) -> None:
        self._output_text.configure(state=tk.NORMAL)
        self._output_text.delete("1.0", tk.END)
        self._output_text.insert("1.0", text)
        self._output_text.configure(state=tk.DISABLED)

    # ------------------------------------------------------------------
    # Clipboard
    # ------------------------------------------------------------------

    def copy(self, text: str) -> None:
        self._root.clipboard_clear()
        self._root.clipboard_append(text)
        # Keep the clipboard populated after the window closes (X11)
        self._root.update()

    # ------------------------------------------------------------------
    # NotificationSink
    # ------------------------------------------------------------------

    def notify(self, message: str, severity: Severity) -> None:
        """Show a colour-coded notice and schedule it to hide."""
        self._log_sink.notify(message, severity)
        background, foreground = _NOTICE_COLOURS[severity]
        self._notice_frame.configure(background=background)
        self._notice_label.configure(text=message, background=background, foreground=foreground)
        self._notice_close.configure(background=background, foreground=foreground)

        if not self._notice_frame.winfo_ismapped():
            self._notice_frame.pack(fill=tk.X, pady=(0, _PAD), before=self._input_frame)

        if self._notice_job is not None:
            self._root.after_cancel(self._notice_job)
        self._notice_job = self._root.after(int(NOTICE_DURATION_S * 1000), self._hide_notice)

    def _hide_notice(self) -> None:
        if self._notice_job is not None:
            self._root.after_cancel(self._notice_job)
            self._notice_job = None
        self._notice_frame.pack_forget()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Launch the Tkinter GUI application.

    RULES:
    - This function blocks until the window is closed
    - Must be called from the main thread
    """
    root = tk.Tk()
    ObfuscatorApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
