"""Widget components for the sidebar"""

from pathlib import Path

import panel as pn

from matrix_reorder.algorithms import ALPHABETICAL, RangePolicy, StatisticMethod
from matrix_reorder.exceptions import MatrixParseError, ShapeError
from matrix_reorder.utils.logging_config import get_logger
from matrix_reorder.utils.matrix_loader import generate_random_matrix, parse_matrix_text

logger = get_logger(__name__)

SORT_METHODS = [ALPHABETICAL] + [m.value for m in StatisticMethod]


def _notify(kind, message):
    """Show a toast when running inside a server, log otherwise."""
    notifications = getattr(pn.state, "notifications", None)
    if notifications is not None:
        getattr(notifications, kind)(message)
    else:
        logger.info(message)


def create_sidebar_widgets(explorer):
    """Create and return sidebar widgets linked to the explorer"""

    widgets = []

    # File upload widget
    file_input = pn.widgets.FileInput(
        accept='.csv,.tsv',
        name='Upload CSV/TSV File',
        width=250,
    )

    def process_file(event):
        """Process uploaded file"""
        if file_input.value is None:
            return
        try:
            text = file_input.value.decode("utf-8")
            row_names, column_names, data = parse_matrix_text(
                text, Path(file_input.filename or "").suffix
            )
            explorer.load(row_names, column_names, data)
            refresh_targets()
            _notify("success", 'File uploaded successfully!')
        except (MatrixParseError, ShapeError, UnicodeDecodeError) as e:
            logger.error("Error processing file: %s", e)
            _notify("error", f'Error processing file: {str(e)}')

    file_input.param.watch(process_file, 'value')
    widgets.append(file_input)

    # Random demo matrix
    rows_input = pn.widgets.IntInput(name='Rows', value=10, start=1, end=200, width=120)
    cols_input = pn.widgets.IntInput(name='Columns', value=10, start=1, end=200, width=120)
    random_btn = pn.widgets.Button(name='Random Matrix', button_type='primary', width=250)

    def load_random(event):
        """Load a random matrix of the chosen size"""
        explorer.load(*generate_random_matrix(rows_input.value, cols_input.value))
        refresh_targets()

    random_btn.on_click(load_random)
    widgets.extend([pn.Row(rows_input, cols_input), random_btn])

    widgets.append(pn.layout.Divider())

    # Normalization and encoding
    widgets.append(pn.widgets.Select.from_param(explorer.param.normalization, width=250))
    widgets.append(pn.widgets.Select.from_param(explorer.param.encoding, width=250))
    widgets.append(pn.widgets.IntSlider.from_param(explorer.param.cell_size, width=250))

    # Per-label range policy
    range_label = pn.widgets.Select(name='Range For Label', options=[], width=250)
    range_policy = pn.widgets.RadioButtonGroup(
        options=[p.value for p in RangePolicy], value=RangePolicy.MIN_MAX.value, width=250
    )
    range_btn = pn.widgets.Button(name='Apply Range', width=250)

    def apply_range(event):
        """Apply the selected range policy to the selected label"""
        if range_label.value is not None:
            explorer.set_range_policy(range_label.value, range_policy.value)

    range_btn.on_click(apply_range)
    widgets.extend([range_label, range_policy, range_btn])

    widgets.append(pn.layout.Divider())

    # Statistical sort
    method_select = pn.widgets.Select(name='Sort By', options=SORT_METHODS, value='sum', width=250)
    direction_select = pn.widgets.RadioButtonGroup(options=['asc', 'desc'], value='desc', width=250)
    sort_rows_btn = pn.widgets.Button(name='Sort Rows', width=120)
    sort_cols_btn = pn.widgets.Button(name='Sort Columns', width=120)
    sort_rows_btn.on_click(
        lambda event: explorer.run("sort_rows", method_select.value, direction_select.value)
    )
    sort_cols_btn.on_click(
        lambda event: explorer.run("sort_columns", method_select.value, direction_select.value)
    )
    widgets.extend([method_select, direction_select, pn.Row(sort_rows_btn, sort_cols_btn)])

    # Similarity sort
    row_target = pn.widgets.Select(name='Similar To Row', options={}, width=250)
    col_target = pn.widgets.Select(name='Similar To Column', options={}, width=250)

    def refresh_targets():
        """Offer the loaded row/column names as similarity targets"""
        row_target.options = {name: i for i, name in enumerate(explorer.store.row_names)}
        col_target.options = {name: j for j, name in enumerate(explorer.store.column_names)}
        range_label.options = list(
            dict.fromkeys(explorer.store.row_names + explorer.store.column_names)
        )

    sim_rows_btn = pn.widgets.Button(name='Rows By Similarity', width=120)
    sim_cols_btn = pn.widgets.Button(name='Columns By Similarity', width=120)
    def sort_by_similarity(event, operation, target):
        """Sort by similarity to the selected target, if any"""
        if target.value is not None:
            explorer.run(operation, target.value, direction_select.value)

    sim_rows_btn.on_click(
        lambda event: sort_by_similarity(event, "sort_rows_by_similarity", row_target)
    )
    sim_cols_btn.on_click(
        lambda event: sort_by_similarity(event, "sort_columns_by_similarity", col_target)
    )
    widgets.extend([row_target, col_target, pn.Row(sim_rows_btn, sim_cols_btn)])

    widgets.append(pn.layout.Divider())

    # Whole-matrix reorderings
    for label, operation in [
        ('Seriation', 'apply_seriation'),
        ('2D Sort', 'two_dim_sort'),
        ('Reverse Rows', 'reverse_rows'),
        ('Reverse Columns', 'reverse_columns'),
        ('Shuffle Rows', 'shuffle_rows'),
        ('Shuffle Columns', 'shuffle_columns'),
        ('Reset Order', 'reset_order'),
    ]:
        button = pn.widgets.Button(name=label, width=250)
        button.on_click(lambda event, op=operation: explorer.run(op))
        widgets.append(button)

    refresh_targets()
    return widgets
