"""Entry point that walks a looped slide and logs every page it visits.

Usage:
    SLIDE_LOOP=true SLIDE_COLUMNS=4 python main.py

Reads ENVIRONMENT and LOG_LEVEL for logging, SLIDE_LOOP, SLIDE_START_PAGE_X
and SLIDE_START_PAGE_Y for the slide options, and SLIDE_COLUMNS,
SLIDE_PAGE_WIDTH, SLIDE_PAGE_HEIGHT and SLIDE_STEPS for the demo grid.
"""

import os

from slidepages.adapters.pages_matrix import PagesMatrix
from slidepages.core.config import SlideConfig
from slidepages.core.logging import (
    bind_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from slidepages.core.navigator import PageNavigator

logger = get_logger(__name__)


def walk_forward(navigator: PageNavigator, steps: int) -> list[int]:
    """Press "next" ``steps`` times and return the exposed column after each landing.

    Landing on a clone page is rewound to its real twin before the exposed
    index is read, the way a scroll engine finishes a wrap-around.
    """
    exposed = [navigator.resolve_exposed_page().page_x]
    for _ in range(steps):
        candidate = navigator.next_page_index()
        page = navigator.resolve_page_by_index(candidate.page_x, candidate.page_y)
        if page is None:
            break
        navigator.set_current_page(page)

        rewind = navigator.resolve_loop_rewind()
        if rewind is not None:
            rewound = navigator.resolve_page_by_index(rewind.page_x, rewind.page_y)
            if rewound is not None:
                navigator.set_current_page(rewound)

        current = navigator.current_page
        exposed_page = navigator.resolve_exposed_page()
        logger.info(
            "page_landed",
            page_x=current.page_x,
            exposed_page_x=exposed_page.page_x,
            x=current.x,
            rewound=rewind is not None,
        )
        exposed.append(exposed_page.page_x)
    return exposed


def run_demo(
    steps: int,
    columns: int,
    page_width: float = 375,
    page_height: float = 200,
    config: SlideConfig | None = None,
    slide_id: str = "demo",
) -> list[int]:
    """Build a grid of ``columns`` pages and walk it forward.

    Every event logged during the walk carries ``slide_id``.
    """
    config = config or SlideConfig()
    bind_contextvars(slide_id=slide_id)
    try:
        matrix = PagesMatrix.from_grid(
            page_width, page_height, columns, loop=config.loop
        )
        navigator = PageNavigator(config)
        navigator.initialize(matrix)
        navigator.set_current_page(navigator.resolve_initial_page())
        return walk_forward(navigator, steps)
    finally:
        unbind_contextvars("slide_id")


if __name__ == "__main__":
    configure_logging()
    run_demo(
        steps=int(os.getenv("SLIDE_STEPS", "6")),
        columns=int(os.getenv("SLIDE_COLUMNS", "4")),
        page_width=float(os.getenv("SLIDE_PAGE_WIDTH", "375")),
        page_height=float(os.getenv("SLIDE_PAGE_HEIGHT", "200")),
        config=SlideConfig.from_env(),
    )
