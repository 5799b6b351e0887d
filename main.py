# main.py
import logging
import sys

from xlmatch.bindings import default_bindings
from xlmatch.log import configure_logging
from xlmatch.messages import MessageBox

logger = logging.getLogger("xlmatch.main")


def main():
    configure_logging()
    bindings = default_bindings(MessageBox())

    # Create and launch the GUI; without a window there is nothing to run.
    try:
        from gui.matcher_gui import MatcherGUI
        app = MatcherGUI(bindings)
    except Exception:
        logger.exception("failed to start the GUI")
        sys.exit(1)

    app.run()
    logger.info("exiting...")


if __name__ == "__main__":
    main()
