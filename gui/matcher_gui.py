# xlmatch GUI
import os
import sys
import logging
import threading
import subprocess
import tkinter as tk
import customtkinter as ctk
import pandas as pd
from tkinter import filedialog, messagebox
from tkinterdnd2 import TkinterDnD, DND_ALL

from xlmatch.addressing import column_letter
from xlmatch.bindings import Bindings
from xlmatch.matcher import STATUS_OK_PREFIX
from xlmatch.options import CompareOptions
from xlmatch.storage import SPREADSHEET_EXTENSIONS

logger = logging.getLogger(__name__)

ctk.set_appearance_mode("dark")

POLL_MS = 200


# Helper to auto-select a column label based on keywords.
def auto_select_header(headers, keywords):
    for header in headers:
        lower_header = header.lower()
        for kw in keywords:
            if kw in lower_header:
                return header
    return headers[0] if headers else ""


def column_labels(first_row):
    """Labels like "B: Part No" for each column of the first row; bare letters for empty headers."""
    labels = []
    for idx, value in enumerate(first_row):
        text = "" if pd.isna(value) else str(value).strip()
        letter = column_letter(idx)
        labels.append(f"{letter}: {text}" if text else letter)
    return labels


def open_in_default_app(path):
    try:
        os.startfile(path)
    except AttributeError:
        # not Windows
        if sys.platform == "darwin":
            subprocess.Popen(["open", path])
        else:
            subprocess.Popen(["xdg-open", path])


class CTkDnD(ctk.CTk, TkinterDnD.DnDWrapper):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.TkdndVersion = TkinterDnD._require(self)


class WorkbookSection:
    """One file picker: drop target button, folder quick-pick and key column menu."""

    def __init__(self, gui, parent_frame, number):
        self.gui = gui
        self.number = number
        self.path = tk.StringVar()
        self.column = tk.StringVar()
        self.quick_pick = tk.StringVar()
        self.labels = []

        self.button = ctk.CTkButton(parent_frame,
            text=f"\n➕\n\nSelect Excel {number} or\nDrag & Drop Here",
            command=self.browse,
            border_width=3,
            fg_color="transparent",
            hover_color=("#D6D6D6", "#505050"),
            text_color=("#333333", "#FFFFFF"),
            corner_radius=10,
            width=200,
            height=150)
        self.button.grid(row=0, column=0, columnspan=2, padx=33, pady=33, sticky="ew")
        self.button.drop_target_register(DND_ALL)
        self.button.dnd_bind('<<Drop>>', self.drop)

        ctk.CTkLabel(parent_frame, text="In folder:", font=("Helvetica", 12)).grid(
            row=1, column=0, padx=5, pady=2, sticky="e")
        self.quick_combo = ctk.CTkComboBox(parent_frame, variable=self.quick_pick, values=[],
                                           command=self._pick_from_folder, justify="left")
        self.quick_combo.grid(row=1, column=1, padx=5, pady=2, sticky="ew")

        ctk.CTkLabel(parent_frame, text="Compare Column:", font=("Helvetica", 12)).grid(
            row=2, column=0, padx=5, pady=2, sticky="e")
        self.column_menu = ctk.CTkOptionMenu(parent_frame, variable=self.column, values=[])
        self.column_menu.grid(row=2, column=1, padx=5, pady=2, sticky="ew")

    def drop(self, event):
        file_path = event.data.strip().replace("{", "").replace("}", "")
        if file_path.lower().endswith(SPREADSHEET_EXTENSIONS):
            self.load(file_path, fg_color="#990d10")
        else:
            messagebox.showerror("Error", "Please drag and drop a valid Excel file (.xlsx or .xlsm).")

    def browse(self):
        file_path = filedialog.askopenfilename(filetypes=[("Excel files", "*.xlsx *.xlsm")],
                                               initialdir=self.gui.browse_dir,
                                               title=f"Select Excel File {self.number}")
        if file_path:
            self.load(file_path)

    def _pick_from_folder(self, name):
        if name:
            self.load(os.path.join(self.gui.browse_dir, name))

    def set_folder_files(self, names):
        self.quick_combo.configure(values=names)

    def load(self, file_path, fg_color="#217346"):
        try:
            df = pd.read_excel(file_path, engine="openpyxl", sheet_name=self.gui.sheet_name,
                               header=None, nrows=1, dtype=str)
        except Exception as e:
            messagebox.showerror("Error", f"Failed to load columns from Excel File {self.number}: {e}")
            return
        first_row = df.iloc[0].tolist() if len(df) else []
        self.labels = column_labels(first_row)
        self.path.set(file_path)
        self.column_menu.configure(values=self.labels)
        self.column.set(auto_select_header(self.labels, ["id", "ref", "number", "code", "name"]))
        self.button.configure(text=os.path.basename(file_path), fg_color=fg_color)

    def column_index(self):
        label = self.column.get()
        if label in self.labels:
            return self.labels.index(label)
        return -1


class MatcherGUI:
    """Window for picking two workbooks and a column in each, then highlighting equal cells."""

    def __init__(self, bindings: Bindings, master=None, sheet_name="Sheet1"):
        self.bindings = bindings
        self.sheet_name = sheet_name
        self.browse_dir = os.path.abspath(".")
        self._worker = None
        self._worker_failed = False

        self.matcherApp = CTkDnD() if master is None else ctk.CTkToplevel(master)
        self.matcherApp.title("xlmatch")

        self.drive = tk.StringVar()
        self.abort_on_missing = tk.BooleanVar(value=False)
        self.row_range_marking = tk.BooleanVar(value=False)
        self.status_text = tk.StringVar(value="")
        # Boolean variable for theme mode; True = dark mode.
        self.theme_mode = tk.BooleanVar(value=True)

        self._build_gui()
        self._refresh_folder()
        self.bindings.invoke("start")

    def _build_gui(self):
        self.matcherApp.grid_rowconfigure(1, weight=1)
        self.matcherApp.grid_columnconfigure(0, weight=1)
        self.matcherApp.grid_columnconfigure(1, weight=1)

        self.location_frame = ctk.CTkFrame(self.matcherApp)
        self.location_frame.grid(row=0, column=0, columnspan=2, padx=10, pady=(10, 0), sticky="ew")
        self._build_location(self.location_frame)

        self.sections = []
        for idx in range(2):
            frame = ctk.CTkFrame(self.matcherApp)
            frame.grid(row=1, column=idx, padx=10, pady=10, sticky="nsew")
            frame.grid_columnconfigure(0, weight=0)
            frame.grid_columnconfigure(1, weight=1)
            self.sections.append(WorkbookSection(self, frame, idx + 1))

        self.options_frame = ctk.CTkFrame(self.matcherApp)
        self.options_frame.grid(row=2, column=0, columnspan=2, padx=10, pady=(0, 10), sticky="ew")
        self._build_options(self.options_frame)

        self.controls_frame = ctk.CTkFrame(self.matcherApp)
        self.controls_frame.grid(row=3, column=0, columnspan=2, padx=10, pady=5, sticky="ew")
        self._build_controls(self.controls_frame)

    def _build_location(self, parent_frame):
        ctk.CTkLabel(parent_frame, text="Drive:", font=("Helvetica", 12)).grid(
            row=0, column=0, padx=5, pady=5, sticky="e")
        drives = self.bindings.invoke("list_drives") or []
        self.drive_menu = ctk.CTkOptionMenu(parent_frame, variable=self.drive, values=drives,
                                            command=self._select_drive)
        self.drive_menu.grid(row=0, column=1, padx=5, pady=5, sticky="w")
        self.folder_label = ctk.CTkLabel(parent_frame, text=self.browse_dir, font=("Helvetica", 11))
        self.folder_label.grid(row=0, column=2, padx=5, pady=5, sticky="w")
        ctk.CTkButton(parent_frame, text="Change Folder", command=self._choose_folder).grid(
            row=0, column=3, padx=5, pady=5)
        parent_frame.grid_columnconfigure(2, weight=1)

    def _build_options(self, parent_frame):
        ctk.CTkCheckBox(parent_frame, text="Stop when a row lacks the compare column",
                        variable=self.abort_on_missing).grid(row=0, column=0, padx=5, pady=2, sticky="w")
        ctk.CTkCheckBox(parent_frame, text="Highlight whole row (columns A-AA) in Excel 1 only",
                        variable=self.row_range_marking).grid(row=1, column=0, padx=5, pady=2, sticky="w")

    def _build_controls(self, parent_frame):
        self.compare_button = ctk.CTkButton(parent_frame, text="Start Compare", command=self._start_compare)
        self.compare_button.grid(row=0, column=0, columnspan=2, pady=10)
        ctk.CTkLabel(parent_frame, textvariable=self.status_text, font=("Helvetica", 12),
                     wraplength=560, justify="left").grid(row=1, column=0, columnspan=2, padx=5, pady=5, sticky="w")
        # Theme toggle switch anchored bottom-right.
        self.theme_switch = ctk.CTkSwitch(parent_frame, text="", variable=self.theme_mode,
                                          command=self.toggle_theme, switch_width=20, switch_height=10)
        self.theme_switch.place(relx=1.0, rely=1.0, anchor="se")
        parent_frame.grid_columnconfigure(0, weight=1)

    def toggle_theme(self):
        if self.theme_mode.get():
            ctk.set_appearance_mode("dark")
            logger.debug("Theme set to dark mode")
        else:
            ctk.set_appearance_mode("light")
            logger.debug("Theme set to light mode")

    # --- Folder handling ---
    def _select_drive(self, drive):
        if drive and os.path.isdir(drive):
            self.browse_dir = drive
            self._refresh_folder()

    def _choose_folder(self):
        directory = filedialog.askdirectory(initialdir=self.browse_dir, title="Select Folder")
        if directory:
            self.browse_dir = directory
            self._refresh_folder()

    def _refresh_folder(self):
        names = self.bindings.invoke("list_spreadsheets", self.browse_dir)
        self.folder_label.configure(text=self.browse_dir)
        for section in self.sections:
            section.set_folder_files(names)

    # --- Comparison ---
    def _start_compare(self):
        if self._worker is not None and self._worker.is_alive():
            return
        first, second = self.sections
        if not first.path.get() or not second.path.get():
            messagebox.showerror("Error", "Please select both Excel files.")
            return

        options = CompareOptions(
            missing_column="abort" if self.abort_on_missing.get() else "skip",
            marking="row_range" if self.row_range_marking.get() else "both",
            sheet_name=self.sheet_name,
        )
        args = (first.path.get(), second.path.get(), first.column_index(), second.column_index())

        self.status_text.set("Comparing...")
        self.compare_button.configure(state="disabled")
        self._worker = threading.Thread(target=self._run_compare, args=args, kwargs={"options": options},
                                        daemon=True)
        self._worker.start()
        self.matcherApp.after(POLL_MS, self._poll_worker)

    def _run_compare(self, *args, **kwargs):
        self._worker_failed = False
        try:
            self.bindings.invoke("compare", *args, **kwargs)
        except Exception:
            logger.exception("comparison worker failed")
            self._worker_failed = True

    def _poll_worker(self):
        if self._worker.is_alive():
            self.matcherApp.after(POLL_MS, self._poll_worker)
            return
        self.compare_button.configure(state="normal")
        status = self.bindings.invoke("msg_text")
        if self._worker_failed:
            status = "Comparison failed unexpectedly, see the log for details."
        self.status_text.set(status)
        if status.startswith(STATUS_OK_PREFIX):
            path = self.sections[0].path.get()
            if messagebox.askyesno("Success", f"{status}\n\nWould you like to open\n{path}\nnow?"):
                open_in_default_app(path)
        else:
            messagebox.showerror("Error", status or "Comparison failed.")

    def run(self):
        if isinstance(self.matcherApp, ctk.CTk):
            self.matcherApp.mainloop()
