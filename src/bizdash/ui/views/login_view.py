from __future__ import annotations

import tkinter as tk
from tkinter import ttk


class LoginView:
    def __init__(self, parent, on_submit):
        self.frame = ttk.Frame(parent)
        self._on_submit = on_submit

        box = ttk.LabelFrame(self.frame, text="Login")
        box.place(relx=0.5, rely=0.4, anchor="center")

        ttk.Label(box, text="Username").grid(row=0, column=0, sticky="w", padx=10, pady=(12, 4))
        self.username = ttk.Entry(box, width=28)
        self.username.grid(row=0, column=1, padx=10, pady=(12, 4))

        ttk.Label(box, text="Password").grid(row=1, column=0, sticky="w", padx=10, pady=4)
        self.password = ttk.Entry(box, width=28, show="•")
        self.password.grid(row=1, column=1, padx=10, pady=4)

        self.error_var = tk.StringVar(value="")
        ttk.Label(box, textvariable=self.error_var, foreground="#d64545").grid(
            row=2, column=0, columnspan=2, sticky="w", padx=10, pady=4
        )

        self.submit_btn = ttk.Button(box, text="Login", style="Big.TButton", command=self.submit)
        self.submit_btn.grid(row=3, column=0, columnspan=2, sticky="ew", padx=10, pady=(4, 12))

        for e in (self.username, self.password):
            e.bind("<Return>", lambda _e: self.submit())

    def submit(self) -> None:
        self.error_var.set("")
        self._on_submit(self.username.get(), self.password.get())

    def show_error(self, message: str) -> None:
        self.error_var.set(message)

    def reset(self) -> None:
        self.error_var.set("")
        self.password.delete(0, tk.END)
        self.username.focus_set()
