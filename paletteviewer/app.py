"""PaletteViewer - Tkinter window showing the spreadsheet color palette."""
import math
import os
import sys
import time
import traceback
from pathlib import Path
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk, ImageDraw
from paletteviewer.catalog import COLOR_NAMES
from paletteviewer.palette import IndexedPalette, get_sorted_colors, build_swatches

WINDOW_TITLE = 'HSSFColor'
WINDOW_SIZE = (640, 480)
GRID_COLUMNS = 6

# native ttk themes to try, in order, before falling back to the default one
NATIVE_THEMES = {
    'win32': ('vista', 'winnative'),
    'darwin': ('aqua',),
}
FALLBACK_THEMES = ('clam',)

# Debug controls (off by default; enable via env vars)
DEBUG_ENABLED = os.getenv('PALETTEVIEWER_DEBUG') == '1'
DEBUG_RESET = os.getenv('PALETTEVIEWER_DEBUG_RESET') == '1'
DEBUG_LOG_PATH = Path.home() / '.paletteviewer_debug.log'

if DEBUG_RESET:
    try:
        if DEBUG_LOG_PATH.exists():
            DEBUG_LOG_PATH.unlink()
    except OSError:
        pass

def _debug_log(message: str):
    if not DEBUG_ENABLED:
        return
    try:
        ts = time.strftime('%Y-%m-%d %H:%M:%S')
        with open(DEBUG_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write(f'[{ts}] {message}\n')
    except OSError:
        pass


class Tooltip:
    """Borderless popup shown while the pointer is over `widget`."""

    def __init__(self, widget, text: str, delay: int = 400):
        self.widget = widget
        self.text = text
        self.delay = delay
        self.tip = None
        self._pending = None
        widget.bind('<Enter>', self._schedule, add='+')
        widget.bind('<Leave>', self.hide, add='+')
        widget.bind('<ButtonPress>', self.hide, add='+')

    def _schedule(self, event=None):
        self._cancel()
        self._pending = self.widget.after(self.delay, self.show)

    def _cancel(self):
        if self._pending is not None:
            self.widget.after_cancel(self._pending)
            self._pending = None

    def show(self):
        self._pending = None
        if self.tip is not None or not self.text:
            return
        x = self.widget.winfo_rootx() + self.widget.winfo_width() // 2
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self.tip = tk.Toplevel(self.widget)
        self.tip.wm_overrideredirect(True)
        self.tip.wm_geometry(f'+{x}+{y}')
        tk.Label(self.tip, text=self.text, justify='center', background='#FFFFE1',
                 relief='solid', borderwidth=1, padx=4, pady=2).pack()

    def hide(self, event=None):
        self._cancel()
        if self.tip is not None:
            self.tip.destroy()
            self.tip = None


class PaletteViewer(tk.Tk):
    def __init__(self, palette, catalog=COLOR_NAMES):
        super().__init__()
        # keep the window hidden until every swatch is in place
        self.withdraw()
        try:
            self.title(WINDOW_TITLE)
            self._apply_native_theme()
            self._apply_icon()
            self.colors = get_sorted_colors(palette)
            self.swatches = build_swatches(self.colors, catalog)
            self.tooltips = []
            self._build_ui()
            self._center(*WINDOW_SIZE)
        except Exception:
            self.destroy()
            raise
        self.protocol('WM_DELETE_WINDOW', self.destroy)
        self.deiconify()
        _debug_log(f'PaletteViewer: {len(self.swatches)} swatches')

    def _apply_native_theme(self):
        candidates = NATIVE_THEMES.get(sys.platform, ()) + FALLBACK_THEMES
        try:
            style = ttk.Style(self)
            available = style.theme_names()
            for name in candidates:
                if name in available:
                    style.theme_use(name)
                    _debug_log(f'theme applied: {name}')
                    return name
        except tk.TclError:
            traceback.print_exc()
            _debug_log('theme lookup failed, keeping default\n' + traceback.format_exc())
        return None

    def _apply_icon(self):
        # small 3x3 swatch grid drawn in memory
        try:
            ico = Image.new('RGBA', (32, 32), (0, 0, 0, 0))
            draw = ImageDraw.Draw(ico)
            for i, sw in enumerate(('#FF0000', '#FFCC00', '#00FF00', '#00CCFF', '#0000FF',
                                    '#CC99FF', '#FFFFFF', '#969696', '#000000')):
                x = (i % 3) * 10 + 1
                y = (i // 3) * 10 + 1
                draw.rectangle((x, y, x + 8, y + 8), fill=sw, outline='#333333')
            self._icon_photo = ImageTk.PhotoImage(ico)
            self.iconphoto(False, self._icon_photo)
        except Exception as e:
            self._icon_photo = None
            _debug_log(f'icon not applied: {e}')

    def _build_ui(self):
        self.status = ttk.Label(self, anchor='w')
        self.status.pack(fill='x', side='bottom')
        self.panel = panel = ttk.Frame(self)
        panel.pack(fill='both', expand=True)
        rows = max(1, math.ceil(len(self.swatches) / GRID_COLUMNS))
        for c in range(GRID_COLUMNS):
            panel.columnconfigure(c, weight=1, uniform='swatch')
        for r in range(rows):
            panel.rowconfigure(r, weight=1, uniform='swatch')
        for i, sw in enumerate(self.swatches):
            lbl = tk.Label(panel, text=sw.hex, anchor='center', bg=sw.background, fg=sw.foreground, cursor='hand2')
            lbl.grid(row=i // GRID_COLUMNS, column=i % GRID_COLUMNS, sticky='nsew')
            lbl.bind('<ButtonRelease-1>', lambda e, hexv=sw.background: self._copy_hex(hexv))
            if sw.tooltip:
                self.tooltips.append(Tooltip(lbl, sw.tooltip))
        self.status.config(text=f'Palette: {len(self.swatches)} colors')

    def _center(self, width, height):
        x = max(0, (self.winfo_screenwidth() - width) // 2)
        y = max(0, (self.winfo_screenheight() - height) // 2)
        self.geometry(f'{width}x{height}+{x}+{y}')

    def _copy_hex(self, hexval: str):
        self.clipboard_clear()
        self.clipboard_append(hexval)
        self.status.config(text=f'Copied {hexval} to clipboard')
        _debug_log(f'copied {hexval}')


def main():
    _debug_log('PaletteViewer: starting')
    try:
        app = PaletteViewer(IndexedPalette())
    except Exception:
        traceback.print_exc()
        _debug_log('PaletteViewer: startup failed\n' + traceback.format_exc())
        return 1
    _debug_log('PaletteViewer: created app, entering mainloop')
    app.mainloop()
    _debug_log('PaletteViewer: mainloop exited')
    return 0


if __name__ == '__main__':
    sys.exit(main())
