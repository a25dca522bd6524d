"""Main TUI application: render loop and key dispatch."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Footer, Header

from gpiolocator.core import LineBank, PollingEngine
from gpiolocator.models import AppConfig, BankSnapshot
from gpiolocator.ui_shared import build_grid

from .decorators import handle_action_errors
from .services import ViewportState
from .widgets import LineGrid, StatusBar

logger = logging.getLogger(__name__)

# Lock wait for bank calls made on the event loop
UI_LOCK_TIMEOUT = 0.05


class LineLocator(App):
    """
    Textual dashboard for locating GPIO lines.

    A PURE UI layer over a LineBank owned by the caller. The polling
    engine samples the bank on its own thread; this app only snapshots
    the bank once per frame and forwards key presses to the bank's
    mutation methods.

    Responsibilities:
    - Redraw the grid at a fixed frame rate from the latest snapshot
    - Map key bindings to acknowledge / block / scroll / quit
    - Start the polling engine on mount and signal it to stop on unmount
    """

    TITLE = "GPIO line locator"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("q,escape", "quit", "Quit", show=True),
        Binding("r", "acknowledge", "Refresh", show=True),
        Binding("b", "block_changed", "Block changed", show=True),
        Binding("j,down", "scroll_down", "Down", show=True),
        Binding("k,up", "scroll_up", "Up", show=True),
    ]

    # =================================================================
    # Initialization & Lifecycle
    # =================================================================

    def __init__(self, bank: LineBank, engine: PollingEngine, config: AppConfig):
        """
        Initialize the Textual UI application.

        Args:
            bank: Line bank shared with the polling engine
            engine: Polling engine (not started yet)
            config: Application configuration (frame rate)
        """
        super().__init__()
        self.bank = bank
        self.engine = engine
        self.config = config

        # UI-specific ephemeral state (not persisted)
        self.viewport = ViewportState(bank.row_count)
        self.last_snapshot: BankSnapshot | None = None
        self._frame_timer: Timer | None = None
        logger.info(f"LineLocator TUI created for {bank.line_count} lines")

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        yield Header()
        yield LineGrid()
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        """Start polling and the render loop once Textual is running."""
        logger.info("TUI mounting - starting polling engine")
        self.engine.start()
        self.refresh_frame()
        self._frame_timer = self.set_interval(self.config.frame_interval, self.refresh_frame)
        logger.info(
            f"Render loop running at {self.config.frames_per_second:g} fps, "
            f"polling every {self.engine.poll_interval:g}s"
        )

    def on_unmount(self) -> None:
        """Signal the polling thread to exit; it is not joined."""
        self._stop_render_loop()
        self.engine.stop()
        logger.info("TUI unmounted")

    async def action_quit(self) -> None:
        """Stop redrawing before Textual tears the widgets down, then exit."""
        self._stop_render_loop()
        self.exit(return_code=0)

    def _stop_render_loop(self) -> None:
        if self._frame_timer is not None:
            self._frame_timer.stop()
            self._frame_timer = None

    # =================================================================
    # Render loop
    # =================================================================

    def refresh_frame(self) -> None:
        """Snapshot the bank and redraw the grid and status bar."""
        try:
            grid = self.query_one(LineGrid)
            status_bar = self.query_one(StatusBar)
        except NoMatches:
            # Widgets already removed during shutdown
            return
        snapshot = self.bank.snapshot(timeout=UI_LOCK_TIMEOUT)
        self.last_snapshot = snapshot
        grid.show_frame(build_grid(snapshot, self.viewport), self.viewport)
        status_bar.update_state(snapshot)

    # =================================================================
    # Key actions
    # =================================================================

    @handle_action_errors("acknowledge changes")
    def action_acknowledge(self) -> None:
        """Clear every change flag."""
        self.bank.acknowledge_all(timeout=UI_LOCK_TIMEOUT)
        self.refresh_frame()

    @handle_action_errors("block changed lines")
    def action_block_changed(self) -> None:
        """Stop polling every line currently flagged as changed."""
        blocked = self.bank.block_changed(timeout=UI_LOCK_TIMEOUT)
        if blocked:
            self.notify(f"Blocked {len(blocked)} line(s): {', '.join(map(str, blocked))}", timeout=3)
        self.refresh_frame()

    def action_scroll_down(self) -> None:
        self.viewport.scroll_down()
        self.refresh_frame()

    def action_scroll_up(self) -> None:
        self.viewport.scroll_up()
        self.refresh_frame()
