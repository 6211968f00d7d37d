import logging
from typing import Optional

from clippings_app.core.models import ParseOutcome
from clippings_app.core.pipeline import reading_status, STATUS_NO_FILE
from clippings_app.core.view import AccordionView

logger = logging.getLogger(__name__)

class OutputTarget:
    """
    What the user sees: the status line, the markdown and the accordion view.

    Every selected file starts a new run. Only the most recent run may
    publish, so a slow read finishing after a newer one is dropped instead
    of overwriting the newer output.
    """

    def __init__(self):
        self.status = ""
        self.markdown = ""
        self.view: Optional[AccordionView] = None
        self._latest_run = 0

    def begin_run(self, filename: str) -> int:
        self._latest_run += 1
        self.status = reading_status(filename)
        return self._latest_run

    def show_no_file(self) -> None:
        self.status = STATUS_NO_FILE

    def is_current(self, run_id: int) -> bool:
        return run_id == self._latest_run

    def publish(self, run_id: int, outcome: ParseOutcome) -> bool:
        """
        Applies an outcome. Failures only update the status line, the
        previous markdown and view stay on display.
        """
        if not self.is_current(run_id):
            logger.warning("Dropping result of run %d, run %d started since", run_id, self._latest_run)
            return False

        self.status = outcome.status
        if outcome.ok:
            self.markdown = outcome.markdown
            self.view = AccordionView(outcome.groups)
        return True

    def render_view(self) -> str:
        if self.view is None:
            return ""
        return self.view.render()
