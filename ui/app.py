"""
AutoClicker — main window and presentation side of the control plane.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import messagebox
import logging
from typing import Optional, Tuple

import config
from core.control_plane import ControlPlane
from core.errors import InvariantViolation, SubscribeError
from core.observer import GlobalInputObserver
from core.simulator import ActionSimulator
from models.messages import RebindRequested, ToggleRequested
from models.settings import MAX_DELAY_MS, ButtonKind, ClickSettings
from ui.theme import *
from ui.widgets import FieldRow, FlatButton, SectionLabel, StyledEntry

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
log = logging.getLogger(__name__)


def parse_delay(text: str) -> Optional[int]:
    """Delay field text to milliseconds, or None unless it is an integer in 0..MAX_DELAY_MS."""
    try:
        delay = int(text.strip())
    except ValueError:
        return None
    return delay if 0 <= delay <= MAX_DELAY_MS else None


def toggle_caption(running: bool, button: str, hotkey: Optional[str]) -> Tuple[str, bool]:
    """Text for the Start/Stop control and whether pointer clicks on it count."""
    if not running:
        return "▶  Start", True
    if button == ButtonKind.LEFT:
        # Simulated left clicks land on the control while the pointer rests on it.
        key = hotkey.upper() if hotkey else "the hotkey"
        return f"Press {key} to stop", False
    return "■  Stop", True


class ClickerApp:
    def __init__(self, simulator=None, listener_factory=None):
        self._plane = ControlPlane(simulator or ActionSimulator(), self, config.DEFAULT_HOTKEY)
        self._observer = GlobalInputObserver(self._plane.send, listener_factory)
        self._root: tk.Tk | None = None
        self._notice_job = None
        self._hotkey: Optional[str] = None
        self._armed_button = config.DEFAULT_BUTTON
        self._fault: Optional[BaseException] = None

    def _build_ui(self):
        root = tk.Tk()
        self._root = root
        root.title("Auto clicker")
        root.geometry(WINDOW_SIZE)
        root.resizable(True, True)
        root.configure(bg=BG_WINDOW)

        f = tk.Frame(root, bg=BG_PANEL, padx=PAD, pady=PAD)
        f.pack(fill="both", expand=True)

        tk.Label(f, text="Auto clicker", bg=BG_PANEL, fg=TEXT_PRIMARY, font=FONT_H2).pack(pady=(0, 8))
        SectionLabel(f, "Settings").pack(fill="x")

        row = FieldRow(f, "Delay (ms):")
        row.pack(fill="x", pady=3)
        self._delay_entry = StyledEntry(row, width=8)
        self._delay_entry.set_value(str(config.DEFAULT_DELAY_MS))
        self._delay_entry.pack(side="left", fill="x", expand=True, ipady=3)

        row = FieldRow(f, "Button:")
        row.pack(fill="x", pady=3)
        self._button_var = tk.StringVar(value=config.DEFAULT_BUTTON)
        om = tk.OptionMenu(row, self._button_var, *ButtonKind.ALL)
        om.config(bg=BG_INPUT, fg=TEXT_PRIMARY, activebackground=BG_BUTTON, highlightthickness=1,
                  highlightbackground=BORDER, relief="flat", font=FONT_BODY)
        om.pack(side="left", fill="x", expand=True)

        row = FieldRow(f, "Keybind:")
        row.pack(fill="x", pady=3)
        self._keybind_btn = FlatButton(row, "…", command=lambda: self._plane.send(RebindRequested()),
                                       bg=BG_BUTTON, hover_bg=BORDER_BRIGHT, font=FONT_BODY, pady=3)
        self._keybind_btn.pack(side="left", fill="x", expand=True)

        self._toggle_btn = FlatButton(f, "▶  Start", command=lambda: self._plane.send(ToggleRequested()),
                                      bg=GREEN, fg=BG_WINDOW, hover_bg=GREEN_HOVER)
        self._toggle_btn.pack(fill="x", pady=(12, 4))

        self._status = tk.Label(f, text="Idle", bg=BG_PANEL, fg=TEXT_MUTED, font=FONT_SMALL)
        self._status.pack(fill="x")

        return root

    def run(self):
        root = self._build_ui()
        try:
            self._observer.start()
        except SubscribeError as e:
            log.critical("%s", e)
            messagebox.showerror("Hotkey unavailable", f"{e}\n\nAuto clicker cannot run without it.")
            root.destroy()
            raise SystemExit(1)

        self._plane.start()
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._pump()
        root.mainloop()

        if self._fault is not None:
            raise self._fault

    def _pump(self):
        try:
            self._plane.process_pending()
        except InvariantViolation as e:
            # tkinter would print a callback error and keep going; stop the app instead.
            log.critical("Internal state corrupted: %s", e)
            self._fault = e
            self._on_close()
            return
        except Exception:
            log.exception("Control message failed")
        self._root.after(config.POLL_INTERVAL_MS, self._pump)

    def _on_close(self):
        if self._fault is None:
            self._plane.close()
        self._observer.stop()
        self._root.destroy()

    # ── Presenter ──
    def click_settings(self) -> Optional[ClickSettings]:
        delay = parse_delay(self._delay_entry.get())
        if delay is None:
            self.show_notice(f"Delay must be a whole number from 0 to {MAX_DELAY_MS} ms")
            return None
        self._armed_button = self._button_var.get()
        return ClickSettings(delay_ms=delay, button=self._armed_button)

    def set_hotkey_label(self, key: str):
        self._hotkey = key
        self._keybind_btn.set_text(key.upper())
        if self._plane.armed:
            self._render_toggle(True)

    def set_awaiting_rebind(self, awaiting: bool):
        if awaiting:
            self._keybind_btn.set_text("Press a key…")

    def set_running(self, running: bool):
        self._render_toggle(running)
        if running:
            self._toggle_btn.set_colors(RED, RED_HOVER)
            self._set_status("●  Clicking", GREEN)
        else:
            self._toggle_btn.set_colors(GREEN, GREEN_HOVER)
            self._set_status("Idle", TEXT_MUTED)

    def _render_toggle(self, running: bool):
        text, clickable = toggle_caption(running, self._armed_button, self._hotkey)
        self._toggle_btn.set_text(text)
        self._toggle_btn.set_enabled(clickable)

    def show_notice(self, text: str):
        self._set_status(f"⚠  {text}", ORANGE)
        self._notice_job = self._root.after(NOTICE_MS, self._clear_notice)

    def _clear_notice(self):
        self._notice_job = None
        self.set_running(self._plane.armed)

    def _set_status(self, text: str, color: str):
        if self._notice_job is not None:
            self._root.after_cancel(self._notice_job)
            self._notice_job = None
        self._status.config(text=text, fg=color, wraplength=200)
