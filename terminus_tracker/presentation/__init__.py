from terminus_tracker.presentation.formatting import ActivityFormatter
from terminus_tracker.presentation.page import PageState, build_page_state, load_page_state, toggle_view
from terminus_tracker.presentation.table import SortState, TableView

__all__ = [
    'ActivityFormatter',
    'PageState',
    'SortState',
    'TableView',
    'build_page_state',
    'load_page_state',
    'toggle_view',
]
