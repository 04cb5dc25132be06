"""Matrix explorer component"""

import panel as pn
import param

from matrix_reorder.config import config
from matrix_reorder.rendering import (
    ENCODINGS,
    VisualizationSettings,
    calculate_optimal_label_rotation,
    generate_matrix_svg,
    label_size_for_cell,
)
from matrix_reorder.services import MatrixStore, ReorderService, current_matrix
from matrix_reorder.utils.logging_config import get_logger

logger = get_logger(__name__)

NORMALIZATION_OPTIONS = ["none", "row", "column", "global"]


class MatrixExplorer(param.Parameterized):
    """Interactive matrix view with reactive updates"""

    normalization = param.Selector(
        default=config.engine.default_normalization,
        objects=NORMALIZATION_OPTIONS,
        doc="Normalization applied after loading",
    )
    encoding = param.Selector(
        default="color", objects=list(ENCODINGS), doc="Cell encoding"
    )
    cell_size = param.Integer(default=40, bounds=(8, 80), doc="Cell size in pixels")
    version = param.Integer(default=0, doc="Bumped whenever the store changes")

    def __init__(self, store=None, service=None, **params):
        super().__init__(**params)
        self.store = store if store is not None else MatrixStore()
        self.service = service if service is not None else ReorderService(self.store)

    def load(self, row_names, column_names, data):
        """Load a matrix into the store and apply the selected normalization."""
        self.store.load(row_names, column_names, data)
        self.store.set_normalization(self.normalization)
        self.version += 1

    def run(self, operation, *args):
        """Run a ReorderService operation by name and refresh the view."""
        applied = getattr(self.service, operation)(*args)
        if applied:
            self.version += 1
        else:
            logger.debug("Operation %s made no change", operation)
        return applied

    def set_range_policy(self, label, policy):
        """Set zero-max or min-max scaling for one row or column label."""
        if not self.store.has_data:
            return False
        self.store.set_range_policy(label, policy)
        self.version += 1
        return True

    @param.depends("normalization", watch=True)
    def _apply_normalization(self):
        if self.store.has_data:
            self.store.set_normalization(self.normalization)
            self.version += 1

    def settings(self):
        """Visualization settings for the current widgets and labels."""
        display = current_matrix(self.store)
        return VisualizationSettings(
            encoding=self.encoding,
            cell_size=self.cell_size,
            font_size=label_size_for_cell(self.cell_size),
            label_rotation=calculate_optimal_label_rotation(
                display.column_names,
                self.cell_size,
                label_size_for_cell(self.cell_size),
            ),
        )

    @param.depends("version", "encoding", "cell_size")
    def create_matrix(self):
        """Render the current matrix as SVG"""
        if not self.store.has_data:
            return pn.pane.Markdown("## No data available")
        svg = generate_matrix_svg(current_matrix(self.store), self.settings())
        return pn.pane.SVG(svg, sizing_mode="fixed")

    @param.depends("version")
    def create_table(self):
        """Create the displayed-values table"""
        if not self.store.has_data:
            return pn.pane.Markdown("## No data available")
        frame = current_matrix(self.store).to_frame(normalized=True).round(3)
        return pn.widgets.Tabulator(
            frame,
            pagination="remote",
            page_size=20,
            height=300,
            show_index=True,
        )

    def view(self):
        """Create the complete explorer view"""
        return pn.Column(
            pn.Column(
                "# Matrix",
                self.create_matrix,
                sizing_mode="stretch_width",
            ),
            pn.layout.Divider(),
            pn.Column(
                "# Displayed Values",
                self.create_table,
                sizing_mode="stretch_width",
            ),
            sizing_mode="stretch_width",
        )
