"""Entry point for the draw probability calculator."""

import wx
from loguru import logger

from utils.logging_setup import configure_logging
from widgets.draw_calc_frame import open_draw_calc


def main() -> None:
    configure_logging()
    logger.info("Starting draw probability calculator")
    app = wx.App(False)
    open_draw_calc()
    app.MainLoop()


if __name__ == "__main__":
    main()
