import matplotlib.pyplot as plt
import pytest

tk = pytest.importorskip("tkinter")

from models.chart_model import ChartSpecError
from ui.main_window import MainWindow

CSV = "month,revenue\nJan,100\nFeb,250\n"


@pytest.fixture
def window():
    try:
        main = MainWindow()
    except tk.TclError:
        pytest.skip("no display available")
    yield main
    main.controller.release_chart()
    main.window.destroy()
    plt.close("all")


def _stats_rows(main):
    return main.results._stats_tree.get_children()


def test_failed_render_clears_previous_results(window):
    window.txt_input.insert("1.0", CSV)
    window.load_text_action()
    window.generate_action()
    assert _stats_rows(window)

    def broken(config):
        raise RuntimeError("canvas gone")

    window.controller.renderer = broken
    with pytest.raises(RuntimeError):
        window.generate_action()
    assert window.controller.visualization is None
    assert not _stats_rows(window)
    assert window.results._placeholder.winfo_manager() == "pack"


def test_bad_selection_keeps_current_results(window):
    window.txt_input.insert("1.0", CSV)
    window.load_text_action()
    window.generate_action()
    window.dd_y._combobox.set("missing")

    with pytest.raises(ChartSpecError):
        window.generate_action()
    assert window.controller.visualization is not None
    assert _stats_rows(window)
