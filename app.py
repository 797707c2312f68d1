from roadsafety.bootstrap_env import ensure_env

ensure_env()  # must run before settings are read

import streamlit as st  # noqa: E402

from roadsafety.config import get_log_level  # noqa: E402
from roadsafety.data.source import select_source  # noqa: E402
from roadsafety.logging_config import configure_logging  # noqa: E402
from roadsafety.ui.layout import render_header, setup_page, sidebar_navigation  # noqa: E402
from roadsafety.ui.pages import district_detail, overview  # noqa: E402
from roadsafety.ui.pages.context import PageContext  # noqa: E402


def main() -> None:
    setup_page()
    configure_logging(get_log_level())

    # Fetched fresh on every run; a failed live read only affects this run
    selection = select_source()
    context = PageContext(districts=selection.districts, is_mock=selection.is_mock)

    render_header(selection.is_mock)
    district_id = sidebar_navigation(selection.districts)

    if district_id is None:
        overview.render(context)
    else:
        district_detail.render(context, district_id)


if __name__ == "__main__":
    main()
