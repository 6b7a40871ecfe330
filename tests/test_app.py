import pytest

tk = pytest.importorskip('tkinter')

from paletteviewer import app as viewer_app
from paletteviewer.app import GRID_COLUMNS, WINDOW_TITLE, PaletteViewer, Tooltip
from paletteviewer.palette import IndexedPalette


@pytest.fixture
def viewer():
    try:
        win = PaletteViewer(IndexedPalette())
    except tk.TclError:
        pytest.skip('no display available')
    yield win
    win.destroy()


def test_window_shows_one_label_per_color(viewer):
    viewer.update_idletasks()
    assert viewer.title() == WINDOW_TITLE
    labels = [w for w in viewer.panel.winfo_children() if isinstance(w, tk.Label)]
    assert len(labels) == len(viewer.swatches) == 46
    first = labels[0]
    assert first.cget('text') == '000000'
    assert first.cget('fg') == 'white'
    assert int(first.grid_info()['column']) == 0
    seventh = labels[GRID_COLUMNS]
    assert int(seventh.grid_info()['row']) == 1


def test_tooltips_list_aliases(viewer):
    texts = [t.text for t in viewer.tooltips]
    assert 'PLUM' in texts
    assert not any('MAROON' in t for t in texts)
    assert 'BLACK\nor\nAUTOMATIC' in texts
    assert all(isinstance(t, Tooltip) for t in viewer.tooltips)


def test_copy_hex_updates_status(viewer):
    viewer._copy_hex('#993366')
    assert viewer.clipboard_get() == '#993366'
    assert '#993366' in viewer.status.cget('text')


def test_failed_construction_propagates():
    class BrokenPalette:
        def get_color(self, index):
            raise RuntimeError('palette unavailable')

    try:
        with pytest.raises(RuntimeError, match='palette unavailable'):
            PaletteViewer(BrokenPalette())
    except tk.TclError:
        pytest.skip('no display available')


def test_main_reports_startup_failure(monkeypatch, capsys):
    def boom(palette):
        raise RuntimeError('no window for you')

    monkeypatch.setattr(viewer_app, 'PaletteViewer', boom)
    assert viewer_app.main() == 1
    assert 'no window for you' in capsys.readouterr().err


def test_theme_lookup_failure_keeps_default(monkeypatch, capsys):
    def no_style(master=None):
        raise tk.TclError('theme engine unavailable')

    monkeypatch.setattr(viewer_app.ttk, 'Style', no_style)
    assert PaletteViewer._apply_native_theme(None) is None
    assert 'theme engine unavailable' in capsys.readouterr().err


def test_theme_lookup_picks_first_available(monkeypatch):
    used = []

    class FakeStyle:
        def __init__(self, master=None):
            pass

        def theme_names(self):
            return ('default', 'clam')

        def theme_use(self, name):
            used.append(name)

    monkeypatch.setattr(viewer_app.ttk, 'Style', FakeStyle)
    assert PaletteViewer._apply_native_theme(None) == 'clam'
    assert used == ['clam']


def test_window_built_when_theme_cannot_be_applied(monkeypatch):
    def broken_theme_use(self, themename=None):
        raise tk.TclError('bad theme')

    try:
        tk.Tk().destroy()
    except tk.TclError:
        pytest.skip('no display available')
    monkeypatch.setattr(viewer_app.ttk.Style, 'theme_use', broken_theme_use)
    win = PaletteViewer(IndexedPalette())
    try:
        assert len(win.swatches) == 46
        assert win.status.cget('text') == 'Palette: 46 colors'
    finally:
        win.destroy()
