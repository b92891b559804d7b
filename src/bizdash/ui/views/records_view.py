from __future__ import annotations

import tkinter as tk
from tkinter import ttk, filedialog
import logging
import math
from typing import Sequence

from bizdash.domain.errors import ValidationError
from bizdash.domain.schema import CollectionSchema

log = logging.getLogger(__name__)


class RecordsView:
    """A page with an add-record form on the left and the collection table on the right."""

    form_title = "Add"

    def __init__(self, notebook: ttk.Notebook, app, schema: CollectionSchema):
        self.app = app
        self.schema = schema
        self.frame = ttk.Frame(notebook)
        notebook.add(self.frame, text=schema.sheet_name)

        self.form = ttk.LabelFrame(self.frame, text=self.form_title, width=270)
        self.form.pack(side="left", fill="y", padx=(0, 6), pady=8)
        self.form.pack_propagate(False)

        right = ttk.LabelFrame(self.frame, text=f"{schema.sheet_name} list")
        right.pack(side="right", fill="both", expand=True, pady=8)

        bar = ttk.Frame(right)
        bar.pack(fill="x", padx=6, pady=(6, 0))
        ttk.Button(bar, text="Export to Excel", command=self.on_export).pack(side="right")

        tree_wrap = ttk.Frame(right)
        tree_wrap.pack(fill="both", expand=True, padx=6, pady=6)

        cols = tuple(c.name for c in schema.columns)
        self.tree = ttk.Treeview(tree_wrap, columns=cols, show="headings", height=20)
        for c in schema.columns:
            self.tree.heading(c.name, text=c.heading)
            self.tree.column(c.name, width=140 if c.name.endswith("name") else 96, anchor="w")

        vsb = ttk.Scrollbar(tree_wrap, orient="vertical", command=self.tree.yview)
        hsb = ttk.Scrollbar(tree_wrap, orient="horizontal", command=self.tree.xview)
        self.tree.configure(yscrollcommand=vsb.set, xscrollcommand=hsb.set)
        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")
        hsb.grid(row=1, column=0, sticky="ew")
        tree_wrap.columnconfigure(0, weight=1)
        tree_wrap.rowconfigure(0, weight=1)

        self._entries: list[tk.Widget] = []
        self._build_form()

        btns = ttk.Frame(self.form)
        btns.grid(row=len(self._entries), column=0, columnspan=2, sticky="ew", padx=8, pady=(6, 8))
        btns.columnconfigure(0, weight=1)
        btns.columnconfigure(1, weight=1)
        ttk.Button(btns, text="Add", command=self.on_submit).grid(row=0, column=0, sticky="ew", padx=(0, 6))
        ttk.Button(btns, text="Clear", command=self.clear_form).grid(row=0, column=1, sticky="ew", padx=(6, 0))

    # ---------- form ----------
    def _build_form(self) -> None:
        raise NotImplementedError

    def _entry(self, label: str) -> ttk.Entry:
        row = len(self._entries)
        ttk.Label(self.form, text=label).grid(row=row, column=0, sticky="w", padx=8, pady=4)
        e = ttk.Entry(self.form, width=16)
        e.grid(row=row, column=1, sticky="ew", padx=8, pady=4)
        e.bind("<Return>", self._on_enter)
        self.form.columnconfigure(1, weight=1)
        self._entries.append(e)
        return e

    def _combo(self, label: str) -> ttk.Combobox:
        row = len(self._entries)
        ttk.Label(self.form, text=label).grid(row=row, column=0, sticky="w", padx=8, pady=4)
        c = ttk.Combobox(self.form, width=16, state="readonly")
        c.grid(row=row, column=1, sticky="ew", padx=8, pady=4)
        self._entries.append(c)
        return c

    def _on_enter(self, _event=None):
        self.on_submit()
        return "break"

    def _required(self, s: str, field: str) -> str:
        s = (s or "").strip()
        if not s:
            raise ValidationError(f"{field} is required.")
        return s

    def _parse_float(self, s: str, field: str) -> float:
        s = self._required(s, field)
        try:
            v = float(s)
        except ValueError:
            raise ValidationError(f"{field} must be a number.") from None
        if not math.isfinite(v):
            raise ValidationError(f"{field} must be a finite number.")
        return v

    def _parse_int(self, s: str, field: str, min_value: int = 1) -> int:
        s = self._required(s, field)
        try:
            f = float(s)
            v = int(f)
        except (ValueError, OverflowError):
            raise ValidationError(f"{field} must be an integer.") from None
        if f != v:
            raise ValidationError(f"{field} must be a whole number.")
        if v < min_value:
            raise ValidationError(f"{field} must be >= {min_value}.")
        return v

    def on_submit(self) -> None:
        try:
            action, args = self.collect()
        except ValidationError as e:
            self.app.show_error("Validation", str(e))
            return
        self.app.run_async(action, *args)

    def collect(self):
        raise NotImplementedError

    def clear_form(self) -> None:
        for e in self._entries:
            if isinstance(e, ttk.Combobox):
                e.set("")
            else:
                e.delete(0, tk.END)
        if self._entries:
            self._entries[0].focus_set()

    # ---------- table ----------
    def show_rows(self, rows: Sequence[Sequence[str]]) -> None:
        for item in self.tree.get_children():
            self.tree.delete(item)
        for row in rows:
            self.tree.insert("", "end", values=tuple(row))

    def on_export(self) -> None:
        directory = filedialog.askdirectory(title=f"Export {self.schema.table_id}.xlsx to folder")
        if not directory:
            return
        self.app.run_async(self.app.controller.export_table, self.schema.key, directory)
