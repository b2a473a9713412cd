# app.py
# CustomTkinter GUI for the term autocomplete engine (dark theme).
# - Pick a catalogue file ("<count>" header, then "<weight> <text>" rows).
# - Background loading thread (keeps UI responsive).
# - Live search with debounce; results & event log panes.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (package installed, or PYTHONPATH=src)
from termcomplete.engine import Engine
from termcomplete.models import Term
from termcomplete import config as CFG


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_row(rank: int, t: Term) -> str:
    return f"{rank:>3}. {t.weight:>14g}  {t.text}"


# -------------------- main app --------------------

class AutocompleteApp(ctk.CTk):
    """Dark-themed GUI that loads a term catalogue and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Term Autocomplete")
        self.geometry("820x600")
        self.minsize(720, 520)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Term Autocomplete", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Open Catalogue", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No catalogue selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Prefix:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing…")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="none", font=self.font_mono, corner_radius=10)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self._set_results("(open a catalogue and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Open a catalogue file to begin.")

    # --------- loading (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose term catalogue",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self._start_loading(path)

    def _start_loading(self, path: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A catalogue is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            # Engine.load swaps the catalogue in one step; searches keep working meanwhile
            self._engine.load(path)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(self._engine.size))

    def _on_load_ok(self, n_terms: int) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_terms:,} terms.")
        self._log(f"Catalogue ready ({n_terms} terms).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load catalogue.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q:
            self._set_results("")
            return
        if not self._engine.ready:
            self._set_results("error: open a catalogue before searching.")
            return

        rows = self._engine.complete(q, top_k=CFG.TOP_K * 4)
        if not rows:
            self._set_results("(no matches)")
            return
        self._set_results("\n".join(format_row(i, t) for i, t in enumerate(rows, 1)))

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = AutocompleteApp()
    app.mainloop()
