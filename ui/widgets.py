"""
Styled widgets for the AutoClicker window.
"""
from __future__ import annotations
import tkinter as tk
from ui.theme import *


class FlatButton(tk.Label):
    """Flat clickable label with hover color."""

    def __init__(self, parent, text: str, command=None,
                 bg=ACCENT, fg=TEXT_PRIMARY, hover_bg=ACCENT_HOVER,
                 font=None, padx=12, pady=6, **kw):
        super().__init__(parent, text=text, bg=bg, fg=fg,
                         font=font or FONT_H3, cursor="hand2",
                         padx=padx, pady=pady, **kw)
        self._cmd = command
        self._enabled = True
        self.bind("<Button-1>", self._click)
        self._bind_hover(bg, hover_bg)

    def _click(self, _=None):
        if self._cmd and self._enabled: self._cmd()

    def set_enabled(self, enabled: bool):
        self._enabled = enabled
        self.config(cursor="hand2" if enabled else "arrow")

    def _bind_hover(self, bg: str, hover: str):
        self.bind("<Enter>", lambda e: self.config(bg=hover))
        self.bind("<Leave>", lambda e: self.config(bg=bg))

    def set_text(self, t): self.config(text=t)

    def set_colors(self, bg: str, hover: str):
        self.config(bg=bg)
        self.unbind("<Enter>"); self.unbind("<Leave>")
        self._bind_hover(bg, hover)


class StyledEntry(tk.Entry):
    def __init__(self, parent, **kw):
        super().__init__(parent, bg=BG_INPUT, fg=TEXT_PRIMARY,
                         insertbackground=TEXT_PRIMARY, relief="flat",
                         font=FONT_BODY, highlightthickness=1,
                         highlightbackground=BORDER, highlightcolor=ACCENT, **kw)

    def set_value(self, v: str):
        self.delete(0, "end")
        self.insert(0, v)


class FieldRow(tk.Frame):
    """Right-aligned caption followed by a widget, like 'Delay: [ 20 ]'."""

    def __init__(self, parent, caption: str, **kw):
        super().__init__(parent, bg=BG_PANEL, **kw)
        tk.Label(self, text=caption, bg=BG_PANEL, fg=TEXT_SECONDARY,
                 font=FONT_SMALL, width=9, anchor="e").pack(side="left", padx=(0, 6))


class SectionLabel(tk.Label):
    def __init__(self, parent, text, **kw):
        super().__init__(parent, text=text.upper(), bg=BG_PANEL,
                         fg=TEXT_MUTED, font=FONT_LABEL, pady=4, **kw)
